"""PriceHistoryEntry domain entity: one logged actual price (append-only)."""
from datetime import date
from typing import Optional

from mealcart.utilities.dates import format_date, parse_date


class PriceHistoryEntry:
    def __init__(self, date: date, item: str, price: float, store: Optional[str] = None):
        self.date = date
        self.item = item
        self.price = price
        self.store = store or None

    def __str__(self) -> str:
        where = f" at {self.store}" if self.store else ""
        return f"{format_date(self.date)} {self.item}: {self.price:.2f}{where}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        price = d.get("price")
        return PriceHistoryEntry(
            date=parse_date(d["date"]),
            item=d.get("item", ""),
            price=float(price) if price not in (None, "") else 0.0,
            store=d.get("store") or None,
        )

    def to_dict(self):
        return {
            "date": format_date(self.date),
            "item": self.item,
            "price": self.price,
            "store": self.store or "",
        }

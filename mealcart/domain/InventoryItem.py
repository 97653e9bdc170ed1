"""InventoryItem domain entity: stock status of a kitchen staple."""
from typing import Optional

from mealcart.domain.Ingredient import normalize_category
from mealcart.logic.shopping.units import normalize_item_name
from mealcart.utilities.constants import DEFAULT_CATEGORY, STATUS_HAVE, STATUS_OUT, STOCK_STATUSES


class InventoryItem:
    def __init__(self, item: str, status: str = STATUS_OUT, category: str = DEFAULT_CATEGORY,
                 typical_price: Optional[float] = None):
        status = (status or "").strip().lower()
        if status not in STOCK_STATUSES:
            raise ValueError(f"Unknown stock status: {status!r}")
        self.item = item
        self.status = status
        self.category = normalize_category(category)
        self.typical_price = typical_price

    @property
    def key(self) -> str:
        return normalize_item_name(self.item)

    @property
    def in_stock(self) -> bool:
        return self.status == STATUS_HAVE

    def __str__(self) -> str:
        price = f" @ {self.typical_price}" if self.typical_price is not None else ""
        return f"{self.item} [{self.status}]{price}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        price = d.get("typical_price")
        return InventoryItem(
            item=d.get("item", ""),
            status=d.get("status", STATUS_OUT),
            category=d.get("category", DEFAULT_CATEGORY),
            typical_price=float(price) if price not in (None, "") else None,
        )

    def to_dict(self):
        return {
            "item": self.item,
            "status": self.status,
            "category": self.category,
            "typical_price": self.typical_price,
        }

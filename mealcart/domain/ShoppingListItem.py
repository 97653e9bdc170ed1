"""ShoppingListItem domain entity: one line of a week's shopping list.

Flags round-trip as booleans; when a row is written as text (CSV, sheets)
the canonical form is "TRUE" / "FALSE". A missing estimated price means
"unknown" and is kept as None, never 0.
"""
from datetime import date
from typing import Optional

from mealcart.domain.Ingredient import normalize_category
from mealcart.logic.shopping.units import normalize_item_name
from mealcart.utilities.constants import DEFAULT_CATEGORY, FLAG_FALSE, FLAG_TRUE
from mealcart.utilities.dates import format_date, parse_date


def parse_flag(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    return str(value or "").strip().upper() in (FLAG_TRUE, "1", "YES")


def format_flag(value: bool) -> str:
    return FLAG_TRUE if value else FLAG_FALSE


class ShoppingListItem:
    def __init__(self, week_start: Optional[date], item: str, quantity: float = 0.0, unit: str = "",
                 category: str = DEFAULT_CATEGORY, estimated_price: Optional[float] = None,
                 checked: bool = False, manual: bool = False):
        self.week_start = week_start
        self.item = item
        self.quantity = quantity
        self.unit = unit
        self.category = normalize_category(category)
        self.estimated_price = estimated_price
        self.checked = checked
        self.manual = manual

    @property
    def key(self) -> str:
        return normalize_item_name(self.item)

    def toggle(self) -> bool:
        self.checked = not self.checked
        return self.checked

    def __str__(self) -> str:
        flags = "x" if self.checked else " "
        price = f" ~{self.estimated_price:.2f}" if self.estimated_price is not None else ""
        return f"[{flags}] {self.item} - {self.quantity} {self.unit}{price}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingListItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates a ShoppingListItem from a stored row (booleans or "TRUE"/"FALSE" text).'''
        d = dict(data)
        week = d.get("week_start")
        price = d.get("estimated_price")
        return ShoppingListItem(
            week_start=parse_date(week) if week else None,
            item=d.get("item", ""),
            quantity=float(d.get("quantity") or 0),
            unit=d.get("unit", "") or "",
            category=d.get("category", DEFAULT_CATEGORY),
            estimated_price=float(price) if price not in (None, "") else None,
            checked=parse_flag(d.get("checked", False)),
            manual=parse_flag(d.get("manual", False)),
        )

    def to_dict(self, text_flags: bool = False):
        '''
        Converts the item to a dictionary. With text_flags the flags become
        "TRUE"/"FALSE" and an unknown price becomes an empty string.
        '''
        price = self.estimated_price
        return {
            "week_start": format_date(self.week_start) if self.week_start else "",
            "item": self.item,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "estimated_price": ("" if price is None else price) if text_flags else price,
            "checked": format_flag(self.checked) if text_flags else self.checked,
            "manual": format_flag(self.manual) if text_flags else self.manual,
        }

"""Ingredient domain entity: one line of a recipe's ingredient list."""
from typing import Optional, Union

from mealcart.utilities.constants import CATEGORIES, DEFAULT_CATEGORY


def normalize_category(value) -> str:
    '''Returns a known store section, falling back to "other".'''
    c = str(value or '').strip().lower()
    return c if c in CATEGORIES else DEFAULT_CATEGORY


class Ingredient:
    def __init__(self, recipe_id: str, item: str, quantity: Union[str, float, int] = "",
                 unit: str = "", category: str = DEFAULT_CATEGORY):
        self.recipe_id = recipe_id
        self.item = item
        # Kept as entered; parse_quantity reads it when the list is built
        self.quantity = quantity
        self.unit = unit
        self.category = normalize_category(category)

    def __str__(self) -> str:
        parts = [str(p) for p in (self.quantity, self.unit, self.item) if p not in ("", None)]
        return f"{' '.join(parts)} ({self.category})"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data, recipe_id: Optional[str] = None):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            recipe_id=recipe_id if recipe_id is not None else d.get("recipe_id", ""),
            item=d.get("item", ""),
            quantity=d.get("quantity", ""),
            unit=d.get("unit", "") or "",
            category=d.get("category", DEFAULT_CATEGORY),
        )

    def to_dict(self):
        return {
            "recipe_id": self.recipe_id,
            "item": self.item,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
        }

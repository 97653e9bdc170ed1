"""Inventory aggregate: lookup from normalized item name to its stock record."""
from typing import Dict, Iterable, Iterator, Optional

from mealcart.domain.InventoryItem import InventoryItem
from mealcart.logic.shopping.units import normalize_item_name


class Inventory:
    def __init__(self, items: Optional[Iterable[InventoryItem]] = None):
        self._index: Dict[str, InventoryItem] = {}
        for item in items or []:
            # Later records win, matching how an edit replaces a row
            self._index[item.key] = item

    def lookup(self, name: str) -> Optional[InventoryItem]:
        '''
        Returns the inventory record for an item name (case/whitespace-insensitive).
        '''
        return self._index.get(normalize_item_name(name))

    def is_in_stock(self, name: str) -> bool:
        item = self.lookup(name)
        return bool(item and item.in_stock)

    def typical_price_of(self, name: str) -> Optional[float]:
        item = self.lookup(name)
        return item.typical_price if item else None

    def __contains__(self, name) -> bool:
        return normalize_item_name(name) in self._index

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self._index.values())
        return f"Inventory:\n\t{items_str}"

    __repr__ = __str__

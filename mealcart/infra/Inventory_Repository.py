"""Inventory persistence; one record per normalized item name."""
import logging
from pathlib import Path
from typing import List, Optional

from mealcart.domain.Inventory import Inventory
from mealcart.domain.InventoryItem import InventoryItem
from mealcart.infra.json_store import JsonCollection
from mealcart.infra.paths import INVENTORY_FILENAME, data_path
from mealcart.logic.shopping.units import normalize_item_name

logger = logging.getLogger(__name__)


class InventoryRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.store = JsonCollection(data_path(INVENTORY_FILENAME, data_dir))

    def list_inventory(self) -> List[InventoryItem]:
        items = []
        for row in self.store.load():
            try:
                items.append(InventoryItem.from_dict(row))
            except (TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed inventory row {row!r}: {e}")
        return items

    def inventory(self) -> Inventory:
        return Inventory(self.list_inventory())

    def get_item(self, name: str) -> Optional[InventoryItem]:
        return self.inventory().lookup(name)

    def add_item(self, item: InventoryItem) -> InventoryItem:
        items = self.list_inventory()
        if any(i.key == item.key for i in items):
            raise ValueError(f"Inventory item '{item.item}' already exists")
        items.append(item)
        self._save(items)
        return item

    def update_item(self, name: str, item: InventoryItem) -> InventoryItem:
        key = normalize_item_name(name)
        items = self.list_inventory()
        if item.key != key and any(i.key == item.key for i in items):
            raise ValueError(f"Another inventory item named '{item.item}' already exists")
        for idx, existing in enumerate(items):
            if existing.key == key:
                items[idx] = item
                self._save(items)
                return item
        raise KeyError(name)

    def delete_item(self, name: str) -> None:
        key = normalize_item_name(name)
        items = self.list_inventory()
        remaining = [i for i in items if i.key != key]
        if len(remaining) == len(items):
            raise KeyError(name)
        self._save(remaining)

    def _save(self, items: List[InventoryItem]) -> None:
        self.store.save([i.to_dict() for i in items])

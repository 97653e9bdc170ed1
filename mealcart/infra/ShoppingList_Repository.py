"""Shopping list persistence, keyed by (week_start, normalized item name)."""
import logging
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

from mealcart.domain.ShoppingListItem import ShoppingListItem
from mealcart.infra.json_store import JsonCollection
from mealcart.infra.paths import SHOPPING_LIST_FILENAME, data_path
from mealcart.logic.shopping.list_builder import merge_regenerated
from mealcart.logic.shopping.units import normalize_item_name

logger = logging.getLogger(__name__)


class ShoppingListRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.store = JsonCollection(data_path(SHOPPING_LIST_FILENAME, data_dir))

    def list_all(self) -> List[ShoppingListItem]:
        items = []
        for row in self.store.load():
            try:
                items.append(ShoppingListItem.from_dict(row))
            except (TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed shopping list row {row!r}: {e}")
        return items

    def list_for_week(self, week_start: date) -> List[ShoppingListItem]:
        return [i for i in self.list_all() if i.week_start == week_start]

    def replace_week(self, week_start: date, items: Iterable[ShoppingListItem]) -> List[ShoppingListItem]:
        others = [i for i in self.list_all() if i.week_start != week_start]
        week_items = list(items)
        for item in week_items:
            item.week_start = week_start
        self._save(others + week_items)
        return week_items

    def save_generated(self, week_start: date, generated: Iterable[ShoppingListItem],
                       preserve_manual: bool = True) -> List[ShoppingListItem]:
        """Replace the week's list with freshly generated items.

        Manual items are kept when preserve_manual is set; otherwise the whole
        week is wiped first.
        """
        merged = merge_regenerated(self.list_for_week(week_start), generated, preserve_manual)
        logger.info("Saving %d shopping items for week %s (preserve_manual=%s)",
                    len(merged), week_start.isoformat(), preserve_manual)
        return self.replace_week(week_start, merged)

    def add_manual_item(self, item: ShoppingListItem) -> ShoppingListItem:
        """Add or replace a user-entered item for its week."""
        item.manual = True
        week = self.list_for_week(item.week_start)
        week = [i for i in week if i.key != item.key] + [item]
        self.replace_week(item.week_start, week)
        return item

    def set_checked(self, week_start: date, name: str, checked: Optional[bool] = None) -> ShoppingListItem:
        """Set the checked flag, or toggle it when checked is None."""
        key = normalize_item_name(name)
        week = self.list_for_week(week_start)
        for item in week:
            if item.key == key:
                if checked is None:
                    item.toggle()
                else:
                    item.checked = bool(checked)
                self.replace_week(week_start, week)
                return item
        raise KeyError(name)

    def remove_item(self, week_start: date, name: str) -> None:
        key = normalize_item_name(name)
        week = self.list_for_week(week_start)
        remaining = [i for i in week if i.key != key]
        if len(remaining) == len(week):
            raise KeyError(name)
        self.replace_week(week_start, remaining)

    def _save(self, items: List[ShoppingListItem]) -> None:
        self.store.save([i.to_dict() for i in items])

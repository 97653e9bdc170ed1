"""Meal plan persistence: at most one recipe per (week_start, day)."""
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from mealcart.domain.MealPlanEntry import MealPlanEntry
from mealcart.infra.json_store import JsonCollection
from mealcart.infra.paths import MEAL_PLANS_FILENAME, data_path

logger = logging.getLogger(__name__)


class PlanRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.store = JsonCollection(data_path(MEAL_PLANS_FILENAME, data_dir))

    def _load(self) -> List[MealPlanEntry]:
        entries = []
        for row in self.store.load():
            try:
                entries.append(MealPlanEntry.from_dict(row))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed meal plan row {row!r}: {e}")
        return entries

    def _save(self, entries: List[MealPlanEntry]) -> None:
        self.store.save([e.to_dict() for e in entries])

    def list_meal_plan(self, week_start: Optional[date] = None) -> List[MealPlanEntry]:
        """All entries, or one week's entries ordered monday..sunday."""
        entries = self._load()
        if week_start is None:
            return entries
        week = [e for e in entries if e.week_start == week_start]
        week.sort(key=lambda e: e.day_index)
        return week

    def set_meal(self, week_start: date, day: str, recipe_id: str) -> MealPlanEntry:
        """Assign a recipe to a day, replacing whatever was planned."""
        new_entry = MealPlanEntry(week_start, day, recipe_id)
        entries = [e for e in self._load() if e.key != new_entry.key]
        entries.append(new_entry)
        self._save(entries)
        return new_entry

    def clear_meal(self, week_start: date, day: str) -> bool:
        key = MealPlanEntry(week_start, day).key
        entries = self._load()
        remaining = [e for e in entries if e.key != key]
        if len(remaining) == len(entries):
            return False
        self._save(remaining)
        return True

    def clear_week(self, week_start: date) -> int:
        """Remove every planned meal of a week. Returns how many were removed."""
        entries = self._load()
        remaining = [e for e in entries if e.week_start != week_start]
        self._save(remaining)
        return len(entries) - len(remaining)

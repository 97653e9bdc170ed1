"""MealPlanEntry domain entity: the recipe assigned to one day of a planning week."""
from datetime import date
from typing import Optional

from mealcart.utilities.constants import DAYS_OF_WEEK
from mealcart.utilities.dates import format_date, parse_date


class MealPlanEntry:
    def __init__(self, week_start: date, day: str, recipe_id: Optional[str] = None):
        if week_start.weekday() != 0:
            raise ValueError(f"week_start must be a Monday, got {week_start.isoformat()}")
        day = (day or "").strip().lower()
        if day not in DAYS_OF_WEEK:
            raise ValueError(f"Unknown day of week: {day!r}")
        self.week_start = week_start
        self.day = day
        self.recipe_id = recipe_id or None

    @property
    def key(self):
        return (self.week_start, self.day)

    @property
    def day_index(self) -> int:
        return DAYS_OF_WEEK.index(self.day)

    def __str__(self) -> str:
        return f"{format_date(self.week_start)} {self.day}: {self.recipe_id or '-'}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return MealPlanEntry(
            week_start=parse_date(d["week_start"]),
            day=d.get("day", ""),
            recipe_id=d.get("recipe_id"),
        )

    def to_dict(self):
        return {
            "week_start": format_date(self.week_start),
            "day": self.day,
            "recipe_id": self.recipe_id,
        }

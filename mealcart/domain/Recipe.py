"""Recipe domain entity: id, name, base servings, instructions, optional cook time and source."""
from typing import Optional, Union

from mealcart.utilities.constants import DEFAULT_RECIPE_SERVINGS


class Recipe:
    def __init__(self, id: str, name: str, servings: Union[int, float, None] = DEFAULT_RECIPE_SERVINGS,
                 instructions: str = "", cook_time: Optional[int] = None, source: Optional[str] = None):
        self.id = id
        self.name = name
        self.servings = servings
        self.instructions = instructions
        self.cook_time = cook_time
        self.source = source

    def __str__(self) -> str:
        return f"{self.name} ({self.id}) - {self.servings} servings"

    __repr__ = __str__

    @property
    def effective_servings(self) -> float:
        """Base servings used for scaling; missing or non-positive reads as 4."""
        try:
            servings = float(self.servings)
        except (TypeError, ValueError):
            return float(DEFAULT_RECIPE_SERVINGS)
        if servings <= 0:
            return float(DEFAULT_RECIPE_SERVINGS)
        return servings

    @staticmethod
    def from_dict(data):
        d = dict(data)
        cook_time = d.get("cook_time")
        return Recipe(
            id=d["id"],
            name=d.get("name", ""),
            servings=d.get("servings"),
            instructions=d.get("instructions", "") or "",
            cook_time=int(cook_time) if cook_time not in (None, "") else None,
            source=d.get("source") or None,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "servings": self.servings,
            "instructions": self.instructions,
            "cook_time": self.cook_time,
            "source": self.source,
        }

"""Recipe ingredient aggregator.

Merges the ingredients of every recipe planned for a week into one line per
normalized item name, scaling each recipe from its base servings to the
household's target servings.
"""
import logging
import math
from datetime import date
from typing import Callable, Dict, Iterable, List, Optional

from mealcart.domain.Ingredient import Ingredient
from mealcart.domain.MealPlanEntry import MealPlanEntry
from mealcart.domain.Recipe import Recipe
from mealcart.logic.shopping.units import normalize_item_name, normalize_unit, parse_quantity
from mealcart.utilities.constants import DEFAULT_TARGET_SERVINGS

logger = logging.getLogger(__name__)

RecipeLookup = Callable[[str], Optional[Recipe]]
IngredientLookup = Callable[[str], List[Ingredient]]


class NoMealsPlanned(Exception):
    """Raised when a week has no meal resolving to a recipe."""

    def __init__(self, week_start: Optional[date] = None):
        self.week_start = week_start
        label = f" for week of {week_start.isoformat()}" if week_start else ""
        super().__init__(f"No meals planned{label}")


class AggregatedLine:
    """Per-item running total; quantity keeps full precision until output."""

    def __init__(self, item: str, unit: str, category: str, quantity: float = 0.0):
        self.item = item
        self.unit = unit
        self.category = category
        self.quantity = quantity

    @property
    def key(self) -> str:
        return normalize_item_name(self.item)

    @property
    def rounded_quantity(self) -> float:
        return round(self.quantity, 2)

    def add(self, quantity: float):
        self.quantity += quantity

    def __repr__(self) -> str:
        return f"AggregatedLine({self.item!r}, {self.quantity!r} {self.unit!r}, {self.category!r})"


def scaling_multiplier(recipe: Recipe, target_servings: float) -> float:
    return target_servings / recipe.effective_servings


def aggregate(week_entries: Iterable[MealPlanEntry], recipe_lookup: RecipeLookup,
              ingredient_lookup: IngredientLookup,
              target_servings: float = DEFAULT_TARGET_SERVINGS, *,
              week_start: Optional[date] = None) -> Dict[str, AggregatedLine]:
    """Sum scaled ingredient quantities across a week's meals.

    Args:
        week_entries: meal plan entries of one week (days without a recipe are ignored).
        recipe_lookup: resolves a recipe id, returning None for deleted recipes.
        ingredient_lookup: returns the ingredient list of a recipe id.
        target_servings: household serving count every recipe is scaled to.
        week_start: week reported by NoMealsPlanned; defaults to the first entry's week.

    Returns:
        Dict keyed by normalized item name, in order of first appearance.
        Display name, unit and category come from the first occurrence; later
        occurrences add their raw scaled number even when the unit differs.

    Raises:
        NoMealsPlanned: no entry resolves to an existing recipe.
        ValueError: target_servings is not positive.
    """
    if target_servings is None or target_servings <= 0:
        raise ValueError(f"target_servings must be positive, got {target_servings!r}")

    entries = list(week_entries)
    if week_start is None and entries:
        week_start = entries[0].week_start
    aggregated: Dict[str, AggregatedLine] = {}
    resolved = 0

    for entry in entries:
        if not entry.recipe_id:
            continue
        recipe = recipe_lookup(entry.recipe_id)
        if recipe is None:
            logger.debug("Skipping %s: recipe %s no longer exists", entry.day, entry.recipe_id)
            continue
        resolved += 1
        multiplier = scaling_multiplier(recipe, target_servings)
        for ingredient in ingredient_lookup(recipe.id):
            key = normalize_item_name(ingredient.item)
            if not key:
                continue
            scaled = parse_quantity(ingredient.quantity) * multiplier
            line = aggregated.get(key)
            if line is None:
                line = AggregatedLine(
                    item=ingredient.item.strip(),
                    unit=normalize_unit(ingredient.unit),
                    category=ingredient.category,
                )
                aggregated[key] = line
            if not math.isfinite(line.quantity + scaled):
                # a contribution that would overflow the float total is dropped
                logger.warning("Ignoring quantity %r of %s in recipe %s: total out of range",
                               ingredient.quantity, key, recipe.id)
                scaled = 0.0
            line.add(scaled)

    if resolved == 0:
        raise NoMealsPlanned(week_start)

    logger.debug("Aggregated %d items from %d meals", len(aggregated), resolved)
    return aggregated


__all__ = ['NoMealsPlanned', 'AggregatedLine', 'aggregate', 'scaling_multiplier']

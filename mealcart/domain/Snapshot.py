"""PlannerSnapshot: an explicit, read-only view of every collection the
shopping-list engine consults.

The host materializes one of these from storage and hands it to the pure
functions in ``mealcart.logic``; nothing is cached between calls.
"""
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional

from mealcart.domain.Ingredient import Ingredient
from mealcart.domain.Inventory import Inventory
from mealcart.domain.InventoryItem import InventoryItem
from mealcart.domain.MealPlanEntry import MealPlanEntry
from mealcart.domain.PriceHistoryEntry import PriceHistoryEntry
from mealcart.domain.Recipe import Recipe
from mealcart.domain.ShoppingListItem import ShoppingListItem


class PlannerSnapshot:
    def __init__(self, recipes: Iterable[Recipe] = (), ingredients: Iterable[Ingredient] = (),
                 inventory_items: Iterable[InventoryItem] = (), meal_plan: Iterable[MealPlanEntry] = (),
                 price_history: Iterable[PriceHistoryEntry] = (),
                 shopping_list: Iterable[ShoppingListItem] = ()):
        self.recipes: Dict[str, Recipe] = {r.id: r for r in recipes}
        self._ingredients: Dict[str, List[Ingredient]] = defaultdict(list)
        for ing in ingredients:
            self._ingredients[ing.recipe_id].append(ing)
        self.inventory_items: List[InventoryItem] = list(inventory_items)
        self.meal_plan: List[MealPlanEntry] = list(meal_plan)
        self.price_history: List[PriceHistoryEntry] = list(price_history)
        self.shopping_list: List[ShoppingListItem] = list(shopping_list)

    def recipe(self, recipe_id: Optional[str]) -> Optional[Recipe]:
        if not recipe_id:
            return None
        return self.recipes.get(recipe_id)

    def ingredients_for(self, recipe_id: str) -> List[Ingredient]:
        return list(self._ingredients.get(recipe_id, []))

    def meal_plan_for(self, week_start: date) -> List[MealPlanEntry]:
        entries = [m for m in self.meal_plan if m.week_start == week_start]
        entries.sort(key=lambda m: m.day_index)
        return entries

    def shopping_list_for(self, week_start: date) -> List[ShoppingListItem]:
        return [s for s in self.shopping_list if s.week_start == week_start]

    def inventory(self) -> Inventory:
        return Inventory(self.inventory_items)

    def __repr__(self) -> str:
        return (f"PlannerSnapshot(recipes={len(self.recipes)}, meal_plan={len(self.meal_plan)}, "
                f"inventory={len(self.inventory_items)}, price_history={len(self.price_history)})")

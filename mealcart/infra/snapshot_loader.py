"""Materialize a PlannerSnapshot from the JSON data directory."""
from pathlib import Path
from typing import Optional

from mealcart.domain.Snapshot import PlannerSnapshot
from mealcart.infra.Inventory_Repository import InventoryRepository
from mealcart.infra.Plan_Repository import PlanRepository
from mealcart.infra.PriceHistory_Repository import PriceHistoryRepository
from mealcart.infra.Recipe_Repository import RecipeRepository
from mealcart.infra.ShoppingList_Repository import ShoppingListRepository


def load_snapshot(data_dir: Optional[Path] = None) -> PlannerSnapshot:
    """Read every collection fully into memory before any computation runs."""
    recipes = RecipeRepository(data_dir)
    return PlannerSnapshot(
        recipes=recipes.list_recipes(),
        ingredients=recipes.list_ingredients(),
        inventory_items=InventoryRepository(data_dir).list_inventory(),
        meal_plan=PlanRepository(data_dir).list_meal_plan(),
        price_history=PriceHistoryRepository(data_dir).list_price_history(),
        shopping_list=ShoppingListRepository(data_dir).list_all(),
    )


__all__ = ['load_snapshot']

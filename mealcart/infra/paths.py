from pathlib import Path
from typing import Optional

from mealcart.utilities.config import DATA_DIR

# File names of each collection inside a data directory (single source of truth)
RECIPES_FILENAME = 'recipes.json'
INGREDIENTS_FILENAME = 'ingredients.json'
INVENTORY_FILENAME = 'inventory.json'
MEAL_PLANS_FILENAME = 'meal_plans.json'
SHOPPING_LIST_FILENAME = 'shopping_list.json'
PRICE_HISTORY_FILENAME = 'price_history.json'


def data_path(filename: str, data_dir: Optional[Path] = None) -> Path:
    return Path(data_dir or DATA_DIR) / filename


__all__ = [
    'DATA_DIR', 'data_path', 'RECIPES_FILENAME', 'INGREDIENTS_FILENAME', 'INVENTORY_FILENAME',
    'MEAL_PLANS_FILENAME', 'SHOPPING_LIST_FILENAME', 'PRICE_HISTORY_FILENAME',
]

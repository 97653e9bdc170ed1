"""Recipe and ingredient persistence. Deleting a recipe cascades to its ingredients."""
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union
from uuid import uuid4

from mealcart.domain.Ingredient import Ingredient
from mealcart.domain.Recipe import Recipe
from mealcart.infra.json_store import JsonCollection
from mealcart.infra.paths import INGREDIENTS_FILENAME, RECIPES_FILENAME, data_path

logger = logging.getLogger(__name__)

RECIPE_FIELDS = ("name", "servings", "instructions", "cook_time", "source")


def _generate_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


class RecipeRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.recipes = JsonCollection(data_path(RECIPES_FILENAME, data_dir))
        self.ingredients = JsonCollection(data_path(INGREDIENTS_FILENAME, data_dir))

    # --- Recipes -------------------------------------------------------------
    def list_recipes(self) -> List[Recipe]:
        recipes = []
        for row in self.recipes.load():
            try:
                recipes.append(Recipe.from_dict(row))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed recipe row {row!r}: {e}")
        return recipes

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        return next((r for r in self.list_recipes() if r.id == recipe_id), None)

    def add_recipe(self, name: str, servings, instructions: str = "", cook_time: Optional[int] = None,
                   source: Optional[str] = None,
                   ingredients: Optional[Iterable[Union[Ingredient, dict]]] = None) -> Recipe:
        recipe = Recipe(_generate_id("r"), name, servings, instructions, cook_time, source)
        rows = self.recipes.load()
        rows.append(recipe.to_dict())
        self.recipes.save(rows)
        if ingredients is not None:
            self.save_recipe_ingredients(recipe.id, ingredients)
        logger.info("Added recipe %s (%s)", recipe.name, recipe.id)
        return recipe

    def update_recipe(self, recipe_id: str, **updates) -> Recipe:
        rows = self.recipes.load()
        for i, row in enumerate(rows):
            if row.get("id") == recipe_id:
                row.update({k: v for k, v in updates.items() if k in RECIPE_FIELDS})
                recipe = Recipe.from_dict(row)
                rows[i] = recipe.to_dict()
                self.recipes.save(rows)
                return recipe
        raise KeyError(recipe_id)

    def delete_recipe(self, recipe_id: str) -> None:
        rows = self.recipes.load()
        remaining = [r for r in rows if r.get("id") != recipe_id]
        if len(remaining) == len(rows):
            raise KeyError(recipe_id)
        self.recipes.save(remaining)
        self.ingredients.save([i for i in self.ingredients.load() if i.get("recipe_id") != recipe_id])
        logger.info("Deleted recipe %s and its ingredients", recipe_id)

    # --- Ingredients ---------------------------------------------------------
    def list_ingredients(self) -> List[Ingredient]:
        return [Ingredient.from_dict(row) for row in self.ingredients.load()]

    def ingredients_for(self, recipe_id: str) -> List[Ingredient]:
        return [i for i in self.list_ingredients() if i.recipe_id == recipe_id]

    def save_recipe_ingredients(self, recipe_id: str,
                                ingredients: Iterable[Union[Ingredient, dict]]) -> List[Ingredient]:
        """Replace a recipe's whole ingredient list."""
        new_items = [
            Ingredient.from_dict(ing.to_dict() if isinstance(ing, Ingredient) else ing, recipe_id=recipe_id)
            for ing in ingredients
        ]
        rows = [i for i in self.ingredients.load() if i.get("recipe_id") != recipe_id]
        rows.extend(ing.to_dict() for ing in new_items)
        self.ingredients.save(rows)
        return new_items

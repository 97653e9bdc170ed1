from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from mealcart.api.deps import get_data_dir
from mealcart.events.event_helpers import publish_recipes_updated
from mealcart.infra.Recipe_Repository import RecipeRepository
from mealcart.utilities.format import format_cook_time
from mealcart.utilities.validators import IngredientListInput, RecipeInput, RecipeUpdateInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _recipe_payload(repo: RecipeRepository, recipe):
    data = recipe.to_dict()
    data["cook_time_label"] = format_cook_time(recipe.cook_time)
    data["ingredients"] = [i.to_dict() for i in repo.ingredients_for(recipe.id)]
    return data


@router.get("")
def list_recipes(data_dir: Path = Depends(get_data_dir)):
    recipes = RecipeRepository(data_dir).list_recipes()
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}


@router.post("", status_code=201)
def add_recipe(payload: RecipeInput, data_dir: Path = Depends(get_data_dir)):
    repo = RecipeRepository(data_dir)
    recipe = repo.add_recipe(
        name=payload.name,
        servings=payload.servings,
        instructions=payload.instructions,
        cook_time=payload.cook_time,
        source=payload.source,
        ingredients=[i.model_dump() for i in payload.ingredients],
    )
    publish_recipes_updated(recipe.id, "created")
    return _recipe_payload(repo, recipe)


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, data_dir: Path = Depends(get_data_dir)):
    repo = RecipeRepository(data_dir)
    recipe = repo.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return _recipe_payload(repo, recipe)


@router.put("/{recipe_id}")
def update_recipe(recipe_id: str, payload: RecipeUpdateInput, data_dir: Path = Depends(get_data_dir)):
    repo = RecipeRepository(data_dir)
    try:
        recipe = repo.update_recipe(recipe_id, **payload.model_dump(exclude_unset=True))
    except KeyError:
        raise HTTPException(status_code=404, detail="Recipe not found")
    publish_recipes_updated(recipe_id, "updated")
    return _recipe_payload(repo, recipe)


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, data_dir: Path = Depends(get_data_dir)):
    try:
        RecipeRepository(data_dir).delete_recipe(recipe_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Recipe not found")
    publish_recipes_updated(recipe_id, "deleted")
    return {"success": True}


@router.get("/{recipe_id}/ingredients")
def get_ingredients(recipe_id: str, data_dir: Path = Depends(get_data_dir)):
    repo = RecipeRepository(data_dir)
    if repo.get_recipe(recipe_id) is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return {"recipe_id": recipe_id, "ingredients": [i.to_dict() for i in repo.ingredients_for(recipe_id)]}


@router.put("/{recipe_id}/ingredients")
def replace_ingredients(recipe_id: str, payload: IngredientListInput, data_dir: Path = Depends(get_data_dir)):
    """Replace the recipe's whole ingredient list."""
    repo = RecipeRepository(data_dir)
    if repo.get_recipe(recipe_id) is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    saved = repo.save_recipe_ingredients(recipe_id, [i.model_dump() for i in payload.ingredients])
    publish_recipes_updated(recipe_id, "ingredients")
    return {"recipe_id": recipe_id, "ingredients": [i.to_dict() for i in saved]}

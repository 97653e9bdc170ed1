from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from mealcart.api.deps import get_data_dir, week_or_400
from mealcart.events.event_helpers import publish_meal_plan_updated
from mealcart.infra.Plan_Repository import PlanRepository
from mealcart.infra.Recipe_Repository import RecipeRepository
from mealcart.utilities.dates import day_label, format_date, is_current_week, next_week, previous_week, week_label
from mealcart.utilities.constants import DAYS_OF_WEEK
from mealcart.utilities.validators import MealAssignmentInput

router = APIRouter(prefix="/api/meal-plan", tags=["meal-plan"])


def _check_day(day: str) -> str:
    d = day.strip().lower()
    if d not in DAYS_OF_WEEK:
        raise HTTPException(status_code=400, detail=f"Unknown day '{day}'")
    return d


@router.get("/{week}")
def get_week_plan(week: str, data_dir: Path = Depends(get_data_dir)):
    """All seven day slots of a week; unplanned days have recipe_id None."""
    week_start = week_or_400(week)
    recipes = {r.id: r for r in RecipeRepository(data_dir).list_recipes()}
    planned = {e.day: e for e in PlanRepository(data_dir).list_meal_plan(week_start)}
    days = []
    for day in DAYS_OF_WEEK:
        entry = planned.get(day)
        recipe = recipes.get(entry.recipe_id) if entry else None
        days.append({
            "day": day,
            "label": day_label(day),
            "recipe_id": entry.recipe_id if entry else None,
            "recipe_name": recipe.name if recipe else None,
            # a plan may still point at a deleted recipe
            "missing_recipe": bool(entry and entry.recipe_id and recipe is None),
        })
    return {
        "week_start": format_date(week_start),
        "label": week_label(week_start),
        "is_current_week": is_current_week(week_start),
        "previous_week": format_date(previous_week(week_start)),
        "next_week": format_date(next_week(week_start)),
        "days": days,
    }


@router.put("/{week}/{day}")
def assign_meal(week: str, day: str, payload: MealAssignmentInput, data_dir: Path = Depends(get_data_dir)):
    week_start = week_or_400(week)
    day = _check_day(day)
    if RecipeRepository(data_dir).get_recipe(payload.recipe_id) is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    entry = PlanRepository(data_dir).set_meal(week_start, day, payload.recipe_id)
    publish_meal_plan_updated(week_start, day, payload.recipe_id)
    return entry.to_dict()


@router.delete("/{week}/{day}")
def clear_meal(week: str, day: str, data_dir: Path = Depends(get_data_dir)):
    week_start = week_or_400(week)
    day = _check_day(day)
    if not PlanRepository(data_dir).clear_meal(week_start, day):
        raise HTTPException(status_code=404, detail="No meal planned for that day")
    publish_meal_plan_updated(week_start, day)
    return {"success": True}


@router.delete("/{week}")
def clear_week(week: str, data_dir: Path = Depends(get_data_dir)):
    week_start = week_or_400(week)
    removed = PlanRepository(data_dir).clear_week(week_start)
    publish_meal_plan_updated(week_start)
    return {"success": True, "removed": removed}

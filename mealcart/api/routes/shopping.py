import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from mealcart.api.deps import get_data_dir, week_or_400
from mealcart.domain.ShoppingListItem import ShoppingListItem
from mealcart.events.event_helpers import publish_shopping_list_generated, publish_shopping_list_updated
from mealcart.infra.ShoppingList_Repository import ShoppingListRepository
from mealcart.infra.csv_export import shopping_list_to_csv
from mealcart.infra.pdf_utils import generate_pdf_for_shopping_list
from mealcart.infra.snapshot_loader import load_snapshot
from mealcart.logic.budget.summary import estimated_total
from mealcart.logic.shopping.aggregator import NoMealsPlanned
from mealcart.logic.shopping.list_builder import generate_shopping_list, group_by_category
from mealcart.utilities import config
from mealcart.utilities.dates import format_date
from mealcart.utilities.validators import GenerateListInput, ManualShoppingItemInput, ShoppingItemUpdateInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping-list"])
logger = logging.getLogger("mealcart_app")


def _list_payload(week_start: date, items: List[ShoppingListItem]):
    return {
        "week_start": format_date(week_start),
        "count": len(items),
        "checked": sum(1 for i in items if i.checked),
        "estimated_total": estimated_total(items),
        "items": [i.to_dict() for i in items],
        "by_category": {c: [i.to_dict() for i in group] for c, group in group_by_category(items).items()},
    }


@router.get("/{week}")
def get_shopping_list(week: str, data_dir: Path = Depends(get_data_dir)):
    week_start = week_or_400(week)
    return _list_payload(week_start, ShoppingListRepository(data_dir).list_for_week(week_start))


@router.post("/{week}/generate")
def generate(week: str, options: Optional[GenerateListInput] = Body(default=None),
             data_dir: Path = Depends(get_data_dir)):
    """Regenerate the week's list from the current meal plan and inventory."""
    week_start = week_or_400(week)
    options = options or GenerateListInput()
    target = options.target_servings if options.target_servings is not None else config.TARGET_SERVINGS
    preserve = options.preserve_manual if options.preserve_manual is not None else config.PRESERVE_MANUAL_ITEMS

    snapshot = load_snapshot(data_dir)
    try:
        generated = generate_shopping_list(snapshot, week_start, target)
    except NoMealsPlanned as e:
        logger.info("Shopping list not generated: %s", e)
        raise HTTPException(status_code=409, detail={"error": "no_meals_planned", "message": str(e)})

    items = ShoppingListRepository(data_dir).save_generated(week_start, generated, preserve_manual=preserve)
    publish_shopping_list_generated(week_start, len(items), preserve)
    payload = _list_payload(week_start, items)
    payload.update({"generated": len(generated), "target_servings": target, "preserve_manual": preserve})
    return payload


@router.post("/{week}/items", status_code=201)
def add_manual_item(week: str, payload: ManualShoppingItemInput, data_dir: Path = Depends(get_data_dir)):
    week_start = week_or_400(week)
    item = ShoppingListItem(week_start=week_start, manual=True, **payload.model_dump())
    ShoppingListRepository(data_dir).add_manual_item(item)
    publish_shopping_list_updated(week_start, item.item, "added")
    return item.to_dict()


@router.patch("/{week}/items/{name}")
def update_item(week: str, name: str, payload: Optional[ShoppingItemUpdateInput] = Body(default=None),
                data_dir: Path = Depends(get_data_dir)):
    """Set the checked flag; an empty body toggles it."""
    week_start = week_or_400(week)
    checked = payload.checked if payload else None
    try:
        item = ShoppingListRepository(data_dir).set_checked(week_start, name, checked)
    except KeyError:
        raise HTTPException(status_code=404, detail="Item not on this week's list")
    publish_shopping_list_updated(week_start, item.item, "checked" if item.checked else "unchecked")
    return item.to_dict()


@router.delete("/{week}/items/{name}")
def remove_item(week: str, name: str, data_dir: Path = Depends(get_data_dir)):
    week_start = week_or_400(week)
    try:
        ShoppingListRepository(data_dir).remove_item(week_start, name)
    except KeyError:
        raise HTTPException(status_code=404, detail="Item not on this week's list")
    publish_shopping_list_updated(week_start, name, "removed")
    return {"success": True}


@router.get("/{week}/pdf")
def export_pdf(week: str, data_dir: Path = Depends(get_data_dir)):
    week_start = week_or_400(week)
    items = ShoppingListRepository(data_dir).list_for_week(week_start)
    pdf_bytes = generate_pdf_for_shopping_list(week_start, items)
    filename = f"shopping_list_{format_date(week_start)}.pdf"
    return Response(content=pdf_bytes, media_type="application/pdf",
                    headers={"Content-Disposition": f"attachment; filename={filename}"})


@router.get("/{week}/csv")
def export_csv(week: str, data_dir: Path = Depends(get_data_dir)):
    week_start = week_or_400(week)
    items = ShoppingListRepository(data_dir).list_for_week(week_start)
    filename = f"shopping_list_{format_date(week_start)}.csv"
    return Response(content=shopping_list_to_csv(items), media_type="text/csv",
                    headers={"Content-Disposition": f"attachment; filename={filename}"})

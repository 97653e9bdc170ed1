from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from mealcart.api.deps import get_data_dir
from mealcart.domain.InventoryItem import InventoryItem
from mealcart.events.event_helpers import publish_inventory_updated
from mealcart.infra.Inventory_Repository import InventoryRepository
from mealcart.utilities.constants import CATEGORIES
from mealcart.utilities.validators import InventoryItemInput

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("")
def list_inventory(data_dir: Path = Depends(get_data_dir)):
    """Inventory grouped by category, in store-section order."""
    items = InventoryRepository(data_dir).list_inventory()
    grouped = {c: [] for c in CATEGORIES}
    for item in items:
        grouped[item.category].append(item.to_dict())
    return {"count": len(items), "items": [i.to_dict() for i in items], "by_category": grouped}


@router.post("", status_code=201)
def add_item(payload: InventoryItemInput, data_dir: Path = Depends(get_data_dir)):
    item = InventoryItem(**payload.model_dump())
    try:
        InventoryRepository(data_dir).add_item(item)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    publish_inventory_updated(item.item, "created", item.status)
    return item.to_dict()


@router.put("/{name}")
def update_item(name: str, payload: InventoryItemInput, data_dir: Path = Depends(get_data_dir)):
    item = InventoryItem(**payload.model_dump())
    try:
        InventoryRepository(data_dir).update_item(name, item)
    except KeyError:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    publish_inventory_updated(item.item, "updated", item.status)
    return item.to_dict()


@router.delete("/{name}")
def delete_item(name: str, data_dir: Path = Depends(get_data_dir)):
    try:
        InventoryRepository(data_dir).delete_item(name)
    except KeyError:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    publish_inventory_updated(name, "deleted")
    return {"success": True}

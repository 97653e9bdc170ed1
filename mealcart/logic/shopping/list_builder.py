"""Shopping list builder.

Provides filter_and_price(lines, inventory) and the generate-for-week entry
point generate_shopping_list(snapshot, week_start, target_servings), plus the
regeneration policy applied when a week's list is replaced.
"""
import logging
import math
from collections import OrderedDict
from datetime import date
from typing import Dict, Iterable, List, Optional

from mealcart.domain.Inventory import Inventory
from mealcart.domain.ShoppingListItem import ShoppingListItem
from mealcart.domain.Snapshot import PlannerSnapshot
from mealcart.logic.shopping.aggregator import AggregatedLine, aggregate
from mealcart.utilities.constants import CATEGORIES, DEFAULT_CATEGORY, DEFAULT_TARGET_SERVINGS

logger = logging.getLogger(__name__)


def estimate_price(typical_price: Optional[float], quantity: float) -> Optional[float]:
    """Unit price x quantity, or None when the price is unknown."""
    if typical_price is None:
        return None
    price = float(typical_price) * quantity
    if not math.isfinite(price):
        return None
    return round(price, 2)


def filter_and_price(aggregated_lines: Dict[str, AggregatedLine], inventory: Inventory,
                     week_start: Optional[date] = None) -> List[ShoppingListItem]:
    """Drop items stocked as 'have' and attach price estimates.

    An item is excluded only when the inventory holds it with status 'have';
    'low', 'out' and unknown items stay on the list.
    """
    items: List[ShoppingListItem] = []
    for key, line in aggregated_lines.items():
        if inventory.is_in_stock(key):
            continue
        typical_price = inventory.typical_price_of(key)
        items.append(ShoppingListItem(
            week_start=week_start,
            item=line.item,
            quantity=line.rounded_quantity,
            unit=line.unit,
            category=line.category,
            # priced from the unrounded total
            estimated_price=estimate_price(typical_price, line.quantity),
            checked=False,
            manual=False,
        ))
    return items


def generate_shopping_list(snapshot: PlannerSnapshot, week_start: date,
                           target_servings: float = DEFAULT_TARGET_SERVINGS) -> List[ShoppingListItem]:
    """Compute the shopping list for one planning week from a snapshot.

    Raises NoMealsPlanned when the week has no resolvable meals. A week whose
    every ingredient is already stocked returns an empty list instead.
    """
    lines = aggregate(
        snapshot.meal_plan_for(week_start),
        snapshot.recipe,
        snapshot.ingredients_for,
        target_servings,
        week_start=week_start,
    )
    items = filter_and_price(lines, snapshot.inventory(), week_start)
    logger.info("Generated %d shopping items for week %s (%d aggregated, %d in stock)",
                len(items), week_start.isoformat(), len(lines), len(lines) - len(items))
    return items


def merge_regenerated(existing: Iterable[ShoppingListItem], generated: Iterable[ShoppingListItem],
                      preserve_manual: bool = True) -> List[ShoppingListItem]:
    """Return the week's list after regeneration.

    With preserve_manual the user's manual items survive and take the slot of
    any generated line with the same item key. Otherwise the week is replaced
    wholesale by the generated items.
    """
    generated = list(generated)
    if not preserve_manual:
        return generated
    kept = [item for item in existing if item.manual]
    manual_keys = {item.key for item in kept}
    return kept + [item for item in generated if item.key not in manual_keys]


def group_by_category(items: Iterable[ShoppingListItem]) -> "OrderedDict[str, List[ShoppingListItem]]":
    """Group items by store section in walking order; unchecked items first."""
    grouped: Dict[str, List[ShoppingListItem]] = {}
    for item in items:
        grouped.setdefault(item.category or DEFAULT_CATEGORY, []).append(item)
    ordered: "OrderedDict[str, List[ShoppingListItem]]" = OrderedDict()
    for category in CATEGORIES:
        if category in grouped:
            # sort is stable, so input order holds within each half
            ordered[category] = sorted(grouped[category], key=lambda i: i.checked)
    return ordered


__all__ = [
    'estimate_price', 'filter_and_price', 'generate_shopping_list',
    'merge_regenerated', 'group_by_category',
]

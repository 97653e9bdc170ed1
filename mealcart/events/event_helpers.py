"""Event helper utilities.

Helper functions for publishing data-change events on the global event bus.

Quick import:
    from mealcart.events.event_helpers import (
        publish_shopping_list_generated, publish_inventory_updated, ...
    )
"""
from __future__ import annotations
from datetime import date
from typing import Optional
from .Event_Bus import (
    publish_event,
    RECIPES_UPDATED, INVENTORY_UPDATED, MEAL_PLAN_UPDATED,
    SHOPPING_LIST_GENERATED, SHOPPING_LIST_UPDATED, PRICE_HISTORY_LOGGED,
)

__all__ = [
    'publish_recipes_updated', 'publish_inventory_updated', 'publish_meal_plan_updated',
    'publish_shopping_list_generated', 'publish_shopping_list_updated', 'publish_prices_logged',
]


def publish_recipes_updated(recipe_id: str, action: str):
    publish_event(RECIPES_UPDATED, {'recipe_id': recipe_id, 'action': action})


def publish_inventory_updated(item: str, action: str, status: Optional[str] = None):
    publish_event(INVENTORY_UPDATED, {'item': item, 'action': action, 'status': status})


def publish_meal_plan_updated(week_start: date, day: Optional[str] = None, recipe_id: Optional[str] = None):
    publish_event(MEAL_PLAN_UPDATED, {
        'week_start': week_start.isoformat(),
        'day': day,
        'recipe_id': recipe_id,
    })


def publish_shopping_list_generated(week_start: date, count: int, preserve_manual: bool):
    """Publish a shopping_list.generated event.

    Payload structure:
        { 'week_start': 'YYYY-MM-DD', 'count': <int>, 'preserve_manual': <bool> }
    """
    publish_event(SHOPPING_LIST_GENERATED, {
        'week_start': week_start.isoformat(),
        'count': count,
        'preserve_manual': preserve_manual,
    })


def publish_shopping_list_updated(week_start: date, item: str, action: str):
    publish_event(SHOPPING_LIST_UPDATED, {
        'week_start': week_start.isoformat(),
        'item': item,
        'action': action,
    })


def publish_prices_logged(count: int, total: float):
    publish_event(PRICE_HISTORY_LOGGED, {'count': count, 'total': total})

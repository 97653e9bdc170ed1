"""Simple Event Bus / Observer implementation for host-side data changes.

Event names:
  recipes.updated          -> payload {"recipe_id": str, "action": str}
  inventory.updated        -> payload {"item": str, "action": str, "status": str | None}
  meal_plan.updated        -> payload {"week_start": str, "day": str | None, "recipe_id": str | None}
  shopping_list.generated  -> payload {"week_start": str, "count": int, "preserve_manual": bool}
  shopping_list.updated    -> payload {"week_start": str, "item": str, "action": str}
  price_history.logged     -> payload {"count": int, "total": float}

Subscribers are callables taking (event_name, payload). The core engine never
publishes; only the API layer does, after a write succeeds.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
RECIPES_UPDATED = "recipes.updated"
INVENTORY_UPDATED = "inventory.updated"
MEAL_PLAN_UPDATED = "meal_plan.updated"
SHOPPING_LIST_GENERATED = "shopping_list.generated"
SHOPPING_LIST_UPDATED = "shopping_list.updated"
PRICE_HISTORY_LOGGED = "price_history.logged"

ALL_EVENTS = (
	RECIPES_UPDATED, INVENTORY_UPDATED, MEAL_PLAN_UPDATED,
	SHOPPING_LIST_GENERATED, SHOPPING_LIST_UPDATED, PRICE_HISTORY_LOGGED,
)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# observer errors never propagate to the publisher
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus (sugar function)."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish_event', 'ALL_EVENTS',
	'RECIPES_UPDATED', 'INVENTORY_UPDATED', 'MEAL_PLAN_UPDATED',
	'SHOPPING_LIST_GENERATED', 'SHOPPING_LIST_UPDATED', 'PRICE_HISTORY_LOGGED',
]

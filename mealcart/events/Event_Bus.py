"""Simple Event Bus / Observer implementation for shopping and planning events.

Event names used so far:
  shopping_list.created -> payload {"shopping_list": ShoppingList}
  shopping_list.item_toggled -> payload {"list_id": str, "item": ShoppingListItem, "progress": dict}
  meal_plan.saved -> payload {"meal_plan": MealPlan, "source": "ai" | "fallback" | "manual"}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
SHOPPING_LIST_CREATED = "shopping_list.created"
SHOPPING_ITEM_TOGGLED = "shopping_list.item_toggled"
MEAL_PLAN_SAVED = "meal_plan.saved"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except ValueError:
			logger.debug("Unsubscribe of unknown callback %r from %s", callback, event_name)

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# one failing subscriber must not stop delivery to the others
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def create_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'create_event',
	'SHOPPING_LIST_CREATED', 'SHOPPING_ITEM_TOGGLED', 'MEAL_PLAN_SAVED'
]

"""Event helper utilities.

Quick import:
    from mealcart.events.event_helpers import (
        publish_shopping_list_created, publish_item_toggled, publish_meal_plan_saved
    )
"""
from __future__ import annotations
from typing import Any
from .Event_Bus import (
    create_event,
    SHOPPING_LIST_CREATED, SHOPPING_ITEM_TOGGLED, MEAL_PLAN_SAVED,
)

__all__ = [
    'publish_shopping_list_created', 'publish_item_toggled', 'publish_meal_plan_saved',
    'SHOPPING_LIST_CREATED', 'SHOPPING_ITEM_TOGGLED', 'MEAL_PLAN_SAVED',
]


def publish_shopping_list_created(shopping_list: Any):
    """Publish a shopping_list.created event."""
    create_event(SHOPPING_LIST_CREATED, {'shopping_list': shopping_list})


def publish_item_toggled(list_id: str, item: Any, progress: dict):
    """Publish a shopping_list.item_toggled event."""
    create_event(SHOPPING_ITEM_TOGGLED, {
        'list_id': list_id,
        'item': item,
        'progress': progress,
    })


def publish_meal_plan_saved(meal_plan: Any, source: str):
    """Publish a meal_plan.saved event; source is "ai", "fallback" or "manual"."""
    create_event(MEAL_PLAN_SAVED, {'meal_plan': meal_plan, 'source': source})

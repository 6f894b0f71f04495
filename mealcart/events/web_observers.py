"""Web-facing observers for shopping and planning events.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - shopping_list.created
  - shopping_list.item_toggled
  - meal_plan.saved

and stores a lightweight in-memory ring buffer of recent events that the web
layer can poll.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; with several worker processes each keeps its own.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    GLOBAL_EVENT_BUS, SHOPPING_LIST_CREATED, SHOPPING_ITEM_TOGGLED, MEAL_PLAN_SAVED
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False


def _summarize(event_name: str, payload: Any) -> Dict[str, Any]:
    evt: Dict[str, Any] = {}
    if not isinstance(payload, dict):
        return evt
    shopping_list = payload.get('shopping_list')
    if shopping_list is not None:
        evt['list_id'] = getattr(shopping_list, 'id', None)
        evt['name'] = getattr(shopping_list, 'name', '')
        evt['items'] = len(getattr(shopping_list, 'items', []))
        evt['total'] = round(getattr(shopping_list, 'total_estimated_cost', 0.0), 2)
    item = payload.get('item')
    if item is not None:
        evt['list_id'] = payload.get('list_id')
        evt['item_id'] = getattr(item, 'id', None)
        evt['name'] = getattr(item, 'ingredient_name', '')
        evt['is_purchased'] = getattr(item, 'is_purchased', False)
        if isinstance(payload.get('progress'), dict):
            evt['percentage'] = payload['progress'].get('percentage')
    plan = payload.get('meal_plan')
    if plan is not None:
        evt['meal_plan_id'] = getattr(plan, 'id', None)
        evt['name'] = getattr(plan, 'name', '')
        evt['meals'] = len(getattr(plan, 'meals', []))
        evt['source'] = payload.get('source')
    return evt


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        evt.update(_summarize(event_name, payload))
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (SHOPPING_LIST_CREATED, SHOPPING_ITEM_TOGGLED, MEAL_PLAN_SAVED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True
    logger.info("Web observers subscribed to shopping and planning events")


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']

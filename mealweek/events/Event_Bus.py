"""Simple Event Bus / Observer implementation for meal plan and recipe changes.

Event names:
  meal_plan.generated -> payload {"version": int, "recipe_ids": [str]}
  meal_plan.rerolled -> payload {"version": int, "slot": int, "old_recipe_id": str, "new_recipe_id": str}
  shopping_list.item_toggled -> payload {"version": int, "name": str, "acquired": bool}
  recipe.saved -> payload {"id": str, "title": str, "created": bool}
  recipe.deleted -> payload {"id": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
MEAL_PLAN_GENERATED = "meal_plan.generated"
MEAL_PLAN_REROLLED = "meal_plan.rerolled"
SHOPPING_ITEM_TOGGLED = "shopping_list.item_toggled"
RECIPE_SAVED = "recipe.saved"
RECIPE_DELETED = "recipe.deleted"

ALL_EVENTS = (MEAL_PLAN_GENERATED, MEAL_PLAN_REROLLED, SHOPPING_ITEM_TOGGLED, RECIPE_SAVED, RECIPE_DELETED)


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
        # observer errors are logged, never raised to the publisher
        for cb in list(self._subscribers.get(event_name, [])):
            try:
                cb(event_name, payload)
            except Exception:
                logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish_event(event_name: str, payload: Any = None) -> None:
    """Publish an event on the global bus."""
    GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
    'EventBus', 'GLOBAL_EVENT_BUS', 'publish_event', 'ALL_EVENTS',
    'MEAL_PLAN_GENERATED', 'MEAL_PLAN_REROLLED', 'SHOPPING_ITEM_TOGGLED', 'RECIPE_SAVED', 'RECIPE_DELETED'
]

"""Event helper utilities.

Typed publishers for the meal plan and recipe events, so callers do not
assemble payload dicts by hand.
"""
from __future__ import annotations
from typing import Any

from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    MEAL_PLAN_GENERATED, MEAL_PLAN_REROLLED, SHOPPING_ITEM_TOGGLED, RECIPE_SAVED, RECIPE_DELETED
)

__all__ = [
    'publish_plan_generated', 'publish_slot_rerolled', 'publish_item_toggled',
    'publish_recipe_saved', 'publish_recipe_deleted'
]


def publish_plan_generated(plan: Any, bus: EventBus = GLOBAL_EVENT_BUS):
    bus.publish(MEAL_PLAN_GENERATED, {
        'version': plan.version,
        'recipe_ids': [r.id for r in plan.recipes]
    })


def publish_slot_rerolled(plan: Any, slot: int, old_recipe_id: str, bus: EventBus = GLOBAL_EVENT_BUS):
    bus.publish(MEAL_PLAN_REROLLED, {
        'version': plan.version,
        'slot': slot,
        'old_recipe_id': old_recipe_id,
        'new_recipe_id': plan.recipes[slot].id
    })


def publish_item_toggled(plan: Any, item: Any, bus: EventBus = GLOBAL_EVENT_BUS):
    bus.publish(SHOPPING_ITEM_TOGGLED, {
        'version': plan.version,
        'name': item.name,
        'acquired': item.acquired
    })


def publish_recipe_saved(recipe: Any, created: bool, bus: EventBus = GLOBAL_EVENT_BUS):
    bus.publish(RECIPE_SAVED, {'id': recipe.id, 'title': recipe.title, 'created': created})


def publish_recipe_deleted(recipe_id: str, bus: EventBus = GLOBAL_EVENT_BUS):
    bus.publish(RECIPE_DELETED, {'id': recipe_id})

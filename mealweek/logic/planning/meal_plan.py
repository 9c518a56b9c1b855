"""Meal plan generation, single-slot re-roll and shopping item toggling.

These functions only compute; persisting the result is the caller's job
(see mealweek.logic.planning.service). Validation errors are raised before
anything is built, so a rejected call never produces a partial plan.
"""
import logging
from typing import List, Sequence

from mealweek.domain.Errors import EmptyPoolError, InvalidSlotError, ItemNotFoundError
from mealweek.domain.MealPlan import MealPlan
from mealweek.domain.Recipe import Recipe
from mealweek.logic.planning.randomness import RandomSource
from mealweek.logic.shopping.list_builder import build_shopping_list
from mealweek.utilities.constants import DAYS_IN_PLAN

logger = logging.getLogger(__name__)


def _draw(pool: Sequence[Recipe], random_source: RandomSource) -> Recipe:
    return pool[random_source.next_index(len(pool))]


def generate_meal_plan(pool: Sequence[Recipe], random_source: RandomSource) -> MealPlan:
    """Draw DAYS_IN_PLAN recipes with replacement; a small pool simply repeats recipes."""
    if not pool:
        raise EmptyPoolError()
    recipes = [_draw(pool, random_source) for _ in range(DAYS_IN_PLAN)]
    logger.debug("Generated plan from pool of %d: %s", len(pool), [r.id for r in recipes])
    return MealPlan(recipes, build_shopping_list(recipes))


def _check_slot(slot_index) -> int:
    if isinstance(slot_index, bool) or not isinstance(slot_index, int):
        raise InvalidSlotError(f"Slot index must be an integer, got {slot_index!r}")
    if not 0 <= slot_index < DAYS_IN_PLAN:
        raise InvalidSlotError(f"Slot index {slot_index} is outside 0..{DAYS_IN_PLAN - 1}")
    return slot_index


def reroll_meal_plan(current_plan: MealPlan, slot_index: int, pool: Sequence[Recipe],
                     random_source: RandomSource) -> MealPlan:
    """Replace the recipe in one slot with a different one from the pool.

    The six other slots keep the very same Recipe objects. If the pool holds no
    recipe other than the one being replaced, it is drawn again from the full pool.
    The shopping list is rebuilt, keeping acquired flags of ingredients still needed.
    """
    slot_index = _check_slot(slot_index)
    if not pool:
        raise EmptyPoolError()

    excluded_id = current_plan.recipes[slot_index].id
    candidates: List[Recipe] = [r for r in pool if r.id != excluded_id]
    if not candidates:
        logger.info("No alternative to recipe %s for slot %d, drawing from full pool", excluded_id, slot_index)
        candidates = list(pool)

    replacement = _draw(candidates, random_source)
    recipes = list(current_plan.recipes)
    recipes[slot_index] = replacement
    logger.debug("Slot %d: %s -> %s", slot_index, excluded_id, replacement.id)
    return MealPlan(
        recipes,
        build_shopping_list(recipes, previous_list=current_plan.shopping_list),
        version=current_plan.version,
    )


def toggle_shopping_item(current_plan: MealPlan, item_name: str, acquired: bool) -> MealPlan:
    """Set the acquired flag of one shopping list item (exact name match). Idempotent."""
    if current_plan.find_item(item_name) is None:
        raise ItemNotFoundError(f"Item '{item_name}' not found")
    shopping_list = []
    for item in current_plan.shopping_list:
        item = item.copy()
        if item.name == item_name:
            item.acquired = acquired
        shopping_list.append(item)
    return MealPlan(current_plan.recipes, shopping_list, version=current_plan.version)


__all__ = ['generate_meal_plan', 'reroll_meal_plan', 'toggle_shopping_item']

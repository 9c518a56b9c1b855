import logging
from typing import Optional

from mealweek.domain.MealPlan import MealPlan
from mealweek.domain.ShoppingList import ShoppingListItem
from mealweek.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from mealweek.events.event_helpers import publish_item_toggled, publish_plan_generated, publish_slot_rerolled
from mealweek.infra.Plan_Repository import PlanRepository
from mealweek.infra.Recipe_Repository import RecipeRepository
from mealweek.infra.Store import KeyValueStore
from mealweek.logic.planning.meal_plan import generate_meal_plan, reroll_meal_plan, toggle_shopping_item
from mealweek.logic.planning.randomness import RandomSource

logger = logging.getLogger(__name__)


class MealPlanService:
    """Runs one plan operation end to end: read, compute, write, announce.

    Each call reads what it needs from the store, computes the new plan and
    writes the whole document back. Concurrent writers are detected through the
    plan version (PlanConflictError) instead of silently overwriting each other.
    """

    def __init__(self, store: KeyValueStore, random_source: RandomSource, bus: EventBus = GLOBAL_EVENT_BUS):
        self.plans = PlanRepository(store)
        self.recipes = RecipeRepository(store)
        self.random_source = random_source
        self.bus = bus

    def get_current(self) -> Optional[MealPlan]:
        return self.plans.get_current()

    def generate(self) -> MealPlan:
        pool = self.recipes.list_plannable_recipes()
        plan = generate_meal_plan(pool, self.random_source)
        self.plans.save(plan)
        logger.info("Meal plan generated version=%s days=%s", plan.version, [r.title for r in plan.recipes])
        publish_plan_generated(plan, self.bus)
        return plan

    def reroll(self, slot_index: int, expected_version: Optional[int] = None) -> MealPlan:
        current = self.plans.require_current()
        if expected_version is None:
            expected_version = current.version
        pool = self.recipes.list_plannable_recipes()
        plan = reroll_meal_plan(current, slot_index, pool, self.random_source)
        old_recipe_id = current.recipes[slot_index].id
        self.plans.save(plan, expected_version=expected_version)
        logger.info("Meal plan slot %d re-rolled: %s -> %s (version=%s)",
                    slot_index, old_recipe_id, plan.recipes[slot_index].id, plan.version)
        publish_slot_rerolled(plan, slot_index, old_recipe_id, self.bus)
        return plan

    def toggle_item(self, item_name: str, acquired: bool) -> ShoppingListItem:
        current = self.plans.require_current()
        plan = toggle_shopping_item(current, item_name, acquired)
        self.plans.save(plan, expected_version=current.version)
        item = plan.find_item(item_name)
        logger.info("Updated status for '%s' to %s", item_name, acquired)
        publish_item_toggled(plan, item, self.bus)
        return item

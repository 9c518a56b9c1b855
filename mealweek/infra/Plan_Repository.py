import logging
from typing import Optional

from mealweek.domain.Errors import PlanConflictError, PlanNotFoundError
from mealweek.domain.MealPlan import MealPlan
from mealweek.infra.Store import KeyValueStore
from mealweek.utilities.constants import MEAL_PLAN_KEY

logger = logging.getLogger(__name__)


class PlanRepository:
    """Reads and writes the single current meal plan document."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get_current(self) -> Optional[MealPlan]:
        doc = self.store.get(MEAL_PLAN_KEY)
        if doc is None:
            return None
        return MealPlan.from_dict(doc)

    def require_current(self) -> MealPlan:
        plan = self.get_current()
        if plan is None:
            raise PlanNotFoundError()
        return plan

    def save(self, plan: MealPlan, expected_version: Optional[int] = None) -> MealPlan:
        """Write the whole plan and bump its version.

        With expected_version, the write only happens if the stored plan still
        carries that version; otherwise PlanConflictError is raised and nothing
        is written. Documents written before versioning count as version 0.
        """
        doc = self.store.get(MEAL_PLAN_KEY)
        stored_version = int(doc.get("version") or 0) if doc else 0
        if expected_version is not None and stored_version != expected_version:
            logger.warning("meal_plan.conflict expected=%s stored=%s", expected_version, stored_version)
            raise PlanConflictError(
                f"Meal plan is at version {stored_version}, request was based on version {expected_version}"
            )
        payload = plan.to_dict()
        payload["version"] = stored_version + 1
        if not self.store.compare_and_set(MEAL_PLAN_KEY, doc, payload):
            logger.warning("meal_plan.conflict plan changed between read and write")
            raise PlanConflictError()
        plan.version = payload["version"]
        logger.info("meal_plan.saved version=%s", plan.version)
        return plan

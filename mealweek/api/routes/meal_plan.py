import logging

from fastapi import APIRouter, Depends, Response

from mealweek.api.dependencies import get_plan_service
from mealweek.domain.Errors import PlanNotFoundError
from mealweek.infra.pdf_utils import generate_pdf_for_plan
from mealweek.logic.planning.service import MealPlanService
from mealweek.utilities.validators import RerollInput, ShoppingItemToggleInput

router = APIRouter(prefix="/api/meal-plan", tags=["meal-plan"])
logger = logging.getLogger(__name__)


@router.get("")
def get_meal_plan(service: MealPlanService = Depends(get_plan_service)):
    plan = service.get_current()
    if plan is None:
        logger.info("No meal plan found")
        raise PlanNotFoundError()
    return plan.to_dict()


@router.post("", status_code=201)
def generate_meal_plan(service: MealPlanService = Depends(get_plan_service)):
    return service.generate().to_dict()


@router.put("/reroll")
def reroll_meal_plan(payload: RerollInput, service: MealPlanService = Depends(get_plan_service)):
    logger.info("Reroll request slot=%s version=%s", payload.recipeIndexToReplace, payload.expected_version())
    plan = service.reroll(payload.recipeIndexToReplace, expected_version=payload.expected_version())
    return plan.to_dict()


@router.patch("/shopping-list")
def update_shopping_list_item(payload: ShoppingItemToggleInput,
                              service: MealPlanService = Depends(get_plan_service)):
    item = service.toggle_item(payload.itemName, payload.acquired)
    return {"message": "Item status updated successfully", "item": item.to_dict()}


@router.get("/export/pdf")
def export_meal_plan_pdf(service: MealPlanService = Depends(get_plan_service)):
    plan = service.get_current()
    if plan is None:
        raise PlanNotFoundError()
    pdf_bytes = generate_pdf_for_plan(plan)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="meal_plan.pdf"'},
    )

"""Domain errors for the recipe box and meal planner.

Every error carries the HTTP status the web layer answers with, so route
handlers can simply let them propagate.
"""


class MealPlannerError(Exception):
    status_code = 500
    default_message = "Meal planner error"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyPoolError(MealPlannerError):
    status_code = 400
    default_message = "No recipes available for meal planning"


class InvalidSlotError(MealPlannerError):
    status_code = 400
    default_message = "Slot index must be an integer between 0 and 6"


class ItemNotFoundError(MealPlannerError):
    status_code = 404
    default_message = "Item not found in shopping list"


class PlanNotFoundError(MealPlannerError):
    status_code = 404
    default_message = "No meal plan found"


class RecipeNotFoundError(MealPlannerError):
    status_code = 404
    default_message = "Recipe not found"


class PlanConflictError(MealPlannerError):
    status_code = 409
    default_message = "Meal plan was changed by another request"


class RecipeImportError(MealPlannerError):
    status_code = 502
    default_message = "AI did not return a valid recipe"


class LLMUnavailableError(MealPlannerError):
    status_code = 503
    default_message = "OpenAI service not configured"

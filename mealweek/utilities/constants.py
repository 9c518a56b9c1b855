from typing import Final

DAYS_IN_PLAN: Final[int] = 7

# Store keys
RECIPE_PREFIX: Final[str] = "recipe:"
MEAL_PLAN_KEY: Final[str] = "mealplan:current"

STANDARD_UNITS: Final[tuple[str, ...]] = tuple(sorted([
    "tsp",
    "tbsp",
    "fl oz",
    "cup",
    "pint",
    "quart",
    "gallon",
    "ml",
    "l",
    "oz",
    "lb",
    "g",
    "kg",
    "pinch",
    "dash",
    "clove",
    "slice",
    "servings",
    "",
]))

RECIPE_IMPORT_PROMPT: Final[str] = (
    """
    You convert recipe text into JSON. Read the recipe the user sends and answer with
    a single JSON object and nothing else. Pick the primary ingredient as "main".
    List every other ingredient under "other" with a numeric "quantity" and a "unit"
    chosen from this list (use "" when none fits): {units}.
    Each instruction step is one string in "instructions".

    Use this format:
    """
)
RECIPE_JSON_FORMAT: Final[str] = (
    """
{
    "title": str,
    "main": str,
    "other": [
      {
        "name": str,
        "quantity": number,
        "unit": str
      }
    ],
    "instructions": [
      str
    ]
}
    """
)

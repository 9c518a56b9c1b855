import re
import json
import logging
from json import JSONDecodeError
from typing import Optional

from openai import OpenAI
from fastapi import APIRouter, Depends
from pydantic import ValidationError

from mealweek.api.dependencies import get_recipe_repository
from mealweek.domain.Errors import LLMUnavailableError, RecipeImportError
from mealweek.domain.Ingredient import parse_quantity
from mealweek.events.event_helpers import publish_recipe_saved
from mealweek.infra.Recipe_Repository import RecipeRepository
from mealweek.utilities.config import OPENAI_API_KEY, OPENAI_MODEL, OPENAI_TEMPERATURE
from mealweek.utilities.constants import RECIPE_IMPORT_PROMPT, RECIPE_JSON_FORMAT, STANDARD_UNITS
from mealweek.utilities.validators import RecipeImportInput, RecipeInput

logger = logging.getLogger(__name__)


# === Helper: Get OpenAI Client ===
def get_openai_client() -> Optional[OpenAI]:
    """Return an OpenAI client if OPENAI_API_KEY is set, otherwise None."""
    if not OPENAI_API_KEY:
        return None
    return OpenAI(api_key=OPENAI_API_KEY)


def _system_prompt() -> str:
    units = ", ".join(f'"{u}"' for u in STANDARD_UNITS)
    return RECIPE_IMPORT_PROMPT.format(units=units) + RECIPE_JSON_FORMAT


# === Recipe Extraction ===
def extract_recipe_from_text(raw_text: str, client: Optional[OpenAI]) -> RecipeInput:
    """Turn free recipe text into a validated RecipeInput using the chat model."""
    if client is None:
        logger.warning("OPENAI_API_KEY not set, cannot import recipe from text.")
        raise LLMUnavailableError()

    logger.info("Recipe import: sending %d characters to %s", len(raw_text), OPENAI_MODEL)
    completion = client.chat.completions.create(
        model=OPENAI_MODEL,
        messages=[
            {"role": "system", "content": _system_prompt()},
            {"role": "user", "content": raw_text},
        ],
        response_format={"type": "json_object"},
        temperature=OPENAI_TEMPERATURE,
    )
    content = (completion.choices[0].message.content or "").strip() if completion.choices else ""
    if not content:
        raise RecipeImportError("OpenAI returned no content.")

    parsed = _parse_json_output(content)
    if not isinstance(parsed, dict):
        raise RecipeImportError("OpenAI response was not valid JSON.")

    try:
        return RecipeInput.model_validate(_coerce_recipe_fields(parsed))
    except ValidationError as e:
        logger.error("AI recipe failed validation: %s", e.errors())
        raise RecipeImportError("OpenAI response did not match recipe format.") from e


def _coerce_recipe_fields(data: dict) -> dict:
    """Bring model output onto the manual-entry schema: numeric quantities, known units."""
    d = dict(data)
    other = []
    for ing in d.get("other") or []:
        if not isinstance(ing, dict):
            continue
        unit = str(ing.get("unit") or "").strip().lower()
        if unit not in STANDARD_UNITS:
            logger.debug("Unknown unit '%s' for %s, leaving it blank", unit, ing.get("name"))
            unit = ""
        other.append({
            "name": ing.get("name", ""),
            "quantity": parse_quantity(ing.get("quantity")),
            "unit": unit,
        })
    d["other"] = other
    return d


def _parse_json_output(text: str):
    try:
        return json.loads(text)
    except JSONDecodeError:
        pass
    cleaned = _remove_trailing_commas(_strip_code_fences(text))
    candidate = _extract_json_by_balancing(cleaned)
    if candidate:
        try:
            return json.loads(_remove_trailing_commas(candidate))
        except JSONDecodeError:
            logger.exception("Failed to decode extracted JSON from AI output")
    return None


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Remove common markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:json)?\n(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```|```$", "", text)
    return text.strip()


def _remove_trailing_commas(text: str) -> str:
    """Remove common trailing commas in JSON-like text to help json.loads succeed."""
    return re.sub(r",\s*(\}|\])", r"\1", text)


def _extract_json_by_balancing(text: str) -> Optional[str]:
    """Extract the first JSON object/array by balancing braces/brackets."""
    start = None
    stack = []
    in_string = False
    escape = False

    for i, ch in enumerate(text):
        if escape:
            escape = False
            continue
        if in_string:
            if ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch in "{[":
            if start is None:
                start = i
            stack.append(ch)
        elif ch in "}]":
            if not stack:
                continue
            opening = stack.pop()
            if (opening == "{" and ch != "}") or (opening == "[" and ch != "]"):
                return None
            if not stack and start is not None:
                return text[start:i + 1]
    return None


# === FastAPI Endpoint ===
router = APIRouter(tags=["recipes"])


@router.post("/api/recipes/import", status_code=201)
def import_recipe(payload: RecipeImportInput,
                  client: Optional[OpenAI] = Depends(get_openai_client),
                  repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe_input = extract_recipe_from_text(payload.rawText, client)
    recipe = repo.create_recipe(recipe_input)
    publish_recipe_saved(recipe, created=True)
    return {"message": "Recipe processed and saved successfully!", "recipe": recipe.to_dict()}

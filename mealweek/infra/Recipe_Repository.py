import logging
import time
from typing import List

from pydantic import ValidationError

from mealweek.domain.Errors import RecipeNotFoundError
from mealweek.domain.Recipe import Recipe
from mealweek.infra.Store import KeyValueStore
from mealweek.utilities.constants import RECIPE_PREFIX
from mealweek.utilities.validators import RecipeInput, StoredRecipe

logger = logging.getLogger(__name__)


def recipe_key(recipe_id: str) -> str:
    return f"{RECIPE_PREFIX}{recipe_id}"


def _parse_stored(key: str, doc) -> Recipe | None:
    """Validate a stored document; malformed entries are logged and dropped."""
    if doc is None:
        logger.warning("Null recipe data found for key %s. Skipping.", key)
        return None
    if isinstance(doc, dict) and not doc.get("id"):
        # id derived from the storage key for documents saved without one
        doc = {**doc, "id": key[len(RECIPE_PREFIX):]}
    try:
        StoredRecipe.model_validate(doc)
    except ValidationError as e:
        logger.warning("Invalid recipe data found for key %s, skipping: %s", key, e.errors())
        return None
    return Recipe.from_dict(doc)


class RecipeRepository:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def list_all_recipes(self) -> List[Recipe]:
        keys = self.store.scan(RECIPE_PREFIX)
        logger.debug("Found %d recipe keys via scan", len(keys))
        if not keys:
            return []
        recipes = []
        for key, doc in zip(keys, self.store.mget(keys)):
            recipe = _parse_stored(key, doc)
            if recipe is not None:
                recipes.append(recipe)
        return recipes

    def list_plannable_recipes(self) -> List[Recipe]:
        recipes = self.list_all_recipes()
        eligible = [r for r in recipes if not r.exclude_from_meal_plan]
        logger.info("Using %d valid recipes for planning (%d excluded from meal planning)",
                    len(eligible), len(recipes) - len(eligible))
        return eligible

    def get_recipe(self, recipe_id: str) -> Recipe:
        key = recipe_key(recipe_id)
        recipe = _parse_stored(key, self.store.get(key))
        if recipe is None:
            raise RecipeNotFoundError(f"Recipe with ID {recipe_id} not found")
        return recipe

    def _new_id(self) -> str:
        return str(int(time.time() * 1000))

    def create_recipe(self, data: RecipeInput) -> Recipe:
        recipe_id = self._new_id()
        while not self.store.set(recipe_key(recipe_id), data.to_document(recipe_id), only_if_absent=True):
            # same millisecond as an existing recipe
            recipe_id = str(int(recipe_id) + 1)
        logger.info("recipe.created id=%s title=%s", recipe_id, data.title)
        return self.get_recipe(recipe_id)

    def update_recipe(self, recipe_id: str, data: RecipeInput) -> Recipe:
        key = recipe_key(recipe_id)
        if self.store.get(key) is None:
            raise RecipeNotFoundError(f"Recipe with ID {recipe_id} not found")
        self.store.set(key, data.to_document(recipe_id))
        logger.info("recipe.updated id=%s title=%s", recipe_id, data.title)
        return self.get_recipe(recipe_id)

    def delete_recipe(self, recipe_id: str) -> None:
        if not self.store.delete(recipe_key(recipe_id)):
            raise RecipeNotFoundError(f"Recipe with ID {recipe_id} not found for deletion")
        logger.info("recipe.deleted id=%s", recipe_id)

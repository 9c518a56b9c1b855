"""FastAPI dependencies: the store, randomness and services handed to each request.

Tests replace get_store / get_random_source through app.dependency_overrides.
"""
from functools import lru_cache

from fastapi import Depends

from mealweek.infra.paths import STORE_FILE
from mealweek.infra.Recipe_Repository import RecipeRepository
from mealweek.infra.Store import JsonFileStore, KeyValueStore
from mealweek.logic.planning.randomness import RandomSource, SystemRandomSource
from mealweek.logic.planning.service import MealPlanService
from mealweek.utilities.config import RANDOM_SEED


@lru_cache
def get_store() -> KeyValueStore:
    return JsonFileStore(STORE_FILE)


@lru_cache
def get_random_source() -> RandomSource:
    return SystemRandomSource(RANDOM_SEED)


def get_plan_service(store: KeyValueStore = Depends(get_store),
                     random_source: RandomSource = Depends(get_random_source)) -> MealPlanService:
    return MealPlanService(store, random_source)


def get_recipe_repository(store: KeyValueStore = Depends(get_store)) -> RecipeRepository:
    return RecipeRepository(store)

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from mealweek.api.dependencies import get_recipe_repository
from mealweek.events.event_helpers import publish_recipe_deleted, publish_recipe_saved
from mealweek.infra.Recipe_Repository import RecipeRepository
from mealweek.logic.recipes.filtering import filter_recipes, main_ingredients
from mealweek.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
logger = logging.getLogger(__name__)


@router.get("")
def list_recipes(main: Optional[str] = Query(default=None),
                 search: Optional[str] = Query(default=None),
                 plannable: bool = Query(default=False),
                 repo: RecipeRepository = Depends(get_recipe_repository)):
    """All valid recipes, optionally narrowed by main ingredient / search text."""
    recipes = repo.list_plannable_recipes() if plannable else repo.list_all_recipes()
    recipes = filter_recipes(recipes, main=main, search=search)
    logger.info("Returning %d valid recipes", len(recipes))
    return [r.to_dict() for r in recipes]


@router.get("/main-ingredients")
def list_main_ingredients(repo: RecipeRepository = Depends(get_recipe_repository)):
    return {"main_ingredients": main_ingredients(repo.list_all_recipes())}


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    return repo.get_recipe(recipe_id).to_dict()


@router.post("", status_code=201)
def create_recipe(payload: RecipeInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = repo.create_recipe(payload)
    publish_recipe_saved(recipe, created=True)
    return recipe.to_dict()


@router.put("/{recipe_id}")
def update_recipe(recipe_id: str, payload: RecipeInput,
                  repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = repo.update_recipe(recipe_id, payload)
    publish_recipe_saved(recipe, created=False)
    return recipe.to_dict()


@router.delete("/{recipe_id}", status_code=204)
def delete_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    repo.delete_recipe(recipe_id)
    publish_recipe_deleted(recipe_id)
    return Response(status_code=204)

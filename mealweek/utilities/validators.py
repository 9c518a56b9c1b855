"""
Input validation schemas using Pydantic for request bodies and stored documents.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator

from mealweek.domain.Ingredient import parse_quantity
from mealweek.utilities.constants import STANDARD_UNITS


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., gt=0)
    unit: str = ""

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('unit')
    @classmethod
    def validate_unit(cls, v):
        if v not in STANDARD_UNITS:
            raise ValueError(f"Unknown unit '{v}'")
        return v


class RecipeInput(BaseModel):
    """Schema for manual recipe entry and updates (id comes from the store)."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=200)
    main: str = Field(..., min_length=1, max_length=100)
    other: List[IngredientInput] = Field(..., min_length=1)
    instructions: List[str] = Field(..., min_length=1)
    image_url: Optional[str] = Field(default=None, alias='imageUrl')
    exclude_from_meal_plan: bool = Field(default=False, alias='excludeFromMealPlan')

    @field_validator('title', 'main', mode='before')
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('instructions')
    @classmethod
    def validate_instructions(cls, v):
        """Drop blank steps; at least one real step must remain."""
        steps = [step.strip() for step in v if step and step.strip()]
        if not steps:
            raise ValueError('Recipe must have at least one instruction')
        return steps

    @field_validator('image_url', mode='before')
    @classmethod
    def empty_image_to_none(cls, v):
        if v in ('', None):
            return None
        return v

    def to_document(self, recipe_id: str) -> dict:
        """Stored shape of the recipe, with the given id."""
        doc = self.model_dump(by_alias=True)
        doc['id'] = recipe_id
        return doc


class StoredIngredient(BaseModel):
    """Lenient read-side schema: legacy rows keep string quantities and free-form units."""
    name: str
    quantity: Union[float, str]
    unit: Optional[str] = ""

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Ingredient name cannot be empty')
        return v

    @field_validator('quantity')
    @classmethod
    def quantity_present(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError('Ingredient quantity cannot be empty')
        if parse_quantity(v) <= 0:
            raise ValueError('Ingredient quantity must be positive')
        return v


class StoredRecipe(BaseModel):
    """Shape a recipe must have in the store to be listed or planned."""
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    main: str = Field(..., min_length=1)
    other: List[StoredIngredient] = Field(..., min_length=1)
    instructions: List[str] = Field(..., min_length=1)

    @field_validator('instructions')
    @classmethod
    def steps_not_empty(cls, v):
        if any(not step for step in v):
            raise ValueError('Instructions cannot contain empty steps')
        return v


class RerollInput(BaseModel):
    """Body of PUT /api/meal-plan/reroll."""
    currentPlan: Optional[dict] = None
    recipeIndexToReplace: StrictInt

    def expected_version(self) -> Optional[int]:
        if not self.currentPlan or 'version' not in self.currentPlan:
            return None
        try:
            return int(self.currentPlan['version'])
        except (TypeError, ValueError):
            return None


class ShoppingItemToggleInput(BaseModel):
    """Body of PATCH /api/meal-plan/shopping-list."""
    itemName: str = Field(..., min_length=1)
    acquired: StrictBool


class RecipeImportInput(BaseModel):
    """Body of POST /api/recipes/import."""
    rawText: str = Field(..., min_length=1)

"""Recipe domain entity: title, main ingredient, other ingredients, instructions."""
from typing import List, Optional

from mealweek.domain.Ingredient import Ingredient


class Recipe:
    def __init__(self, id: str = "", title: str = "", main: str = "",
                 other: Optional[List[Ingredient]] = None, instructions: Optional[List[str]] = None,
                 image_url: Optional[str] = None, exclude_from_meal_plan: bool = False):
        self.id = id
        self.title = title
        self.main = main
        self.other = other[:] if other else []
        self.instructions = instructions[:] if instructions else []
        self.image_url = image_url
        self.exclude_from_meal_plan = exclude_from_meal_plan

    def __str__(self) -> str:
        return f"{self.title} ({self.id}) - main: {self.main} - {len(self.other)} ingredients"

    __repr__ = __str__

    def ingredient_names(self) -> List[str]:
        return [ing.name for ing in self.other]

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Recipe(
            id=str(d.get("id", "")),
            title=d.get("title", ""),
            main=d.get("main", ""),
            other=[Ingredient.from_dict(ing) for ing in d.get("other") or []],
            instructions=list(d.get("instructions") or []),
            image_url=d.get("imageUrl") or None,
            exclude_from_meal_plan=bool(d.get("excludeFromMealPlan", False)),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "main": self.main,
            "other": [ing.to_dict() for ing in self.other],
            "instructions": list(self.instructions),
            "imageUrl": self.image_url,
            "excludeFromMealPlan": self.exclude_from_meal_plan,
        }

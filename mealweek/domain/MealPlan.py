"""MealPlan domain entity: seven recipes (day 1..7), their shopping list and a write version."""
from typing import List, Optional

from mealweek.domain.Recipe import Recipe
from mealweek.domain.ShoppingList import ShoppingListItem
from mealweek.utilities.constants import DAYS_IN_PLAN


class MealPlan:
    def __init__(self, recipes: List[Recipe], shopping_list: Optional[List[ShoppingListItem]] = None,
                 version: int = 0):
        if len(recipes) != DAYS_IN_PLAN:
            raise ValueError(f"A meal plan needs exactly {DAYS_IN_PLAN} recipes, got {len(recipes)}")
        self.recipes = list(recipes)
        self.shopping_list = list(shopping_list) if shopping_list else []
        self.version = version

    def __str__(self) -> str:
        days = ", ".join(f"Day {i + 1}: {r.title}" for i, r in enumerate(self.recipes))
        return f"MealPlan v{self.version} [{days}] - {len(self.shopping_list)} shopping items"

    __repr__ = __str__

    def find_item(self, name: str) -> Optional[ShoppingListItem]:
        '''Exact (case-sensitive) lookup on the stored, lower-cased item name.'''
        for item in self.shopping_list:
            if item.name == name:
                return item
        return None

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return MealPlan(
            recipes=[Recipe.from_dict(r) for r in d.get("recipes") or []],
            shopping_list=[ShoppingListItem.from_dict(i) for i in d.get("shoppingList") or []],
            version=int(d.get("version") or 0),
        )

    def to_dict(self):
        return {
            "recipes": [r.to_dict() for r in self.recipes],
            "shoppingList": [i.to_dict() for i in self.shopping_list],
            "version": self.version,
        }

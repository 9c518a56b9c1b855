"""Shopping list builder.

Provides build_shopping_list(recipes, previous_list=None): one entry per distinct
(lower-cased) ingredient name across the plan's recipes.
"""
from typing import Dict, Iterable, List, Optional

from mealweek.domain.Recipe import Recipe
from mealweek.domain.ShoppingList import OccurrenceCount, ShoppingListItem


def _ingredients_of(recipe) -> list:
    other = getattr(recipe, 'other', None)
    if not isinstance(other, (list, tuple)):
        return []
    return list(other)


def build_shopping_list(recipes: Iterable[Recipe],
                        previous_list: Optional[List[ShoppingListItem]] = None) -> List[ShoppingListItem]:
    """Aggregate the ingredients of a plan's recipes.

    Args:
        recipes: the plan's recipes, day 1..7 (repeats allowed).
        previous_list: shopping list of the plan before the change, if any.

    Returns:
        Items in first-seen order. quantity counts how many times the ingredient
        appears across the recipes (a recipe served on 3 days counts 3 times); the
        unit is the one seen first. acquired is carried over from previous_list by
        name, new names start un-acquired.
    """
    items: Dict[str, ShoppingListItem] = {}
    for recipe in recipes:
        for ing in _ingredients_of(recipe):
            name = getattr(ing, 'name', None)
            if not isinstance(name, str) or not name.strip():
                continue
            key = name.lower()
            existing = items.get(key)
            if existing is None:
                items[key] = ShoppingListItem(key, OccurrenceCount(1), getattr(ing, 'unit', '') or '', False)
            else:
                existing.quantity = existing.quantity.increment()

    if previous_list:
        acquired_by_name = {item.name: item.acquired for item in previous_list}
        for key, item in items.items():
            item.acquired = acquired_by_name.get(key, False)

    return list(items.values())


__all__ = ['build_shopping_list']

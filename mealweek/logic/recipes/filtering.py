"""Recipe browsing helpers: filter by main ingredient and free-text search."""
from typing import Iterable, List, Optional

from mealweek.domain.Recipe import Recipe


def _norm(text) -> str:
    return (text or '').strip().lower()


def filter_recipes(recipes: Iterable[Recipe], main: Optional[str] = None,
                   search: Optional[str] = None) -> List[Recipe]:
    """Keep recipes whose main ingredient equals `main` and whose title, main or any
    ingredient name contains `search` (both case-insensitive, both optional)."""
    wanted_main = _norm(main)
    needle = _norm(search)
    result = []
    for recipe in recipes:
        if wanted_main and _norm(recipe.main) != wanted_main:
            continue
        if needle:
            haystack = [recipe.title, recipe.main, *recipe.ingredient_names()]
            if not any(needle in _norm(text) for text in haystack):
                continue
        result.append(recipe)
    return result


def main_ingredients(recipes: Iterable[Recipe]) -> List[str]:
    """Distinct main ingredients (lower-cased), sorted, for the filter bar."""
    return sorted({_norm(r.main) for r in recipes if _norm(r.main)})


__all__ = ['filter_recipes', 'main_ingredients']

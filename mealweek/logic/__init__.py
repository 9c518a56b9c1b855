"""Core business logic layer.

Subpackages:
- planning: meal plan generation, re-roll, shopping item toggle
- shopping: building shopping lists
- recipes: recipe browsing and filtering
"""
__all__ = ["planning", "shopping", "recipes"]

from .recipe_base import RecipeBase
from .recipe_create import RecipeCreate
from .recipe import Recipe

__all__ = [
    "RecipeBase",
    "RecipeCreate",
    "Recipe",
]

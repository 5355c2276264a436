from .recipe_base import RecipeBase


class RecipeCreate(RecipeBase):
    """Body of create and update requests; any client supplied id is dropped."""

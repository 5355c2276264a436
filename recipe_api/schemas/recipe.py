from pydantic import ConfigDict, model_serializer

from .recipe_base import RecipeBase


class Recipe(RecipeBase):
    # for reading data from SQLAlchemy objects
    model_config = ConfigDict(from_attributes=True)

    id: int

    @model_serializer(mode="wrap")
    def id_first(self, handler):
        data = handler(self)
        return {"id": data.pop("id"), **data}

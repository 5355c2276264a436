from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecipeBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    ingredients: list[str] = Field(default_factory=list)
    instructions: str = ""

    # null behaves like an absent field
    @field_validator("name", "instructions", mode="before")
    @classmethod
    def null_text_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("ingredients", mode="before")
    @classmethod
    def null_ingredients_to_empty(cls, value):
        return [] if value is None else value

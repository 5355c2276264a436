"""JSON wire format for recipes.

Request bodies are decoded into a fixed-shape ``RecipeCreate``: unknown keys are
dropped and absent or null fields fall back to ``""`` / ``[]``. Responses are
encoded with the ``id``, ``name``, ``ingredients`` and ``instructions`` keys.
"""
from typing import Any, Sequence

from pydantic import TypeAdapter, ValidationError

from recipe_api.core.errors import DecodeError

from .recipe import Recipe
from .recipe_create import RecipeCreate

_payload = TypeAdapter(Any)


def decode(body: bytes) -> RecipeCreate:
    try:
        return RecipeCreate.model_validate_json(body)
    except ValidationError as exc:
        details = "; ".join(error["msg"] for error in exc.errors())
        raise DecodeError(f"Invalid recipe body: {details}") from exc


def encode(payload: Recipe | Sequence[Recipe] | str) -> bytes:
    return _payload.dump_json(payload)

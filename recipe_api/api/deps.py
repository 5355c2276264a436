from fastapi import Request

from recipe_api.core.errors import NotFound
from recipe_api.services.recipe_service import RecipeGateway

MAX_RECIPE_ID = 2**31 - 1


def get_gateway(request: Request) -> RecipeGateway:
    return request.app.state.gateway


def parse_recipe_id(recipe_id: str) -> int:
    # only plain ASCII digits, and ids outside the SERIAL range can never match a row
    if not (recipe_id.isascii() and recipe_id.isdigit()):
        raise NotFound(recipe_id)
    value = int(recipe_id)
    if not 0 < value <= MAX_RECIPE_ID:
        raise NotFound(recipe_id)
    return value

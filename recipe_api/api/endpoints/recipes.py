import logging

from fastapi import APIRouter, Depends, Request, Response

from recipe_api.api.deps import get_gateway, parse_recipe_id
from recipe_api.schemas import Recipe
from recipe_api.schemas.codec import decode, encode
from recipe_api.services.recipe_service import RecipeGateway

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/recipes")
async def read_recipes(gateway: RecipeGateway = Depends(get_gateway)) -> Response:
    rows = await gateway.list_all()
    recipes = [Recipe.model_validate(row) for row in rows]
    return Response(content=encode(recipes))


@router.get("/recipes/{recipe_id}")
async def read_recipe_by_id(
    recipe_id: int = Depends(parse_recipe_id), gateway: RecipeGateway = Depends(get_gateway)
) -> Response:
    row = await gateway.get_by_id(recipe_id)
    return Response(content=encode(Recipe.model_validate(row)))


@router.post("/recipes")
async def create_recipe(request: Request, gateway: RecipeGateway = Depends(get_gateway)) -> Response:
    recipe_in = decode(await request.body())
    logger.debug("Decoded recipe: %r", recipe_in)

    recipe_id = await gateway.insert(recipe_in.name, recipe_in.ingredients, recipe_in.instructions)
    recipe = Recipe(id=recipe_id, **recipe_in.model_dump())
    return Response(content=encode(recipe), status_code=201)


@router.put("/recipes/{recipe_id}")
async def update_recipe(
    request: Request,
    recipe_id: int = Depends(parse_recipe_id),
    gateway: RecipeGateway = Depends(get_gateway),
) -> Response:
    recipe_in = decode(await request.body())

    await gateway.update(recipe_id, recipe_in.name, recipe_in.ingredients, recipe_in.instructions)
    recipe = Recipe(id=recipe_id, **recipe_in.model_dump())
    return Response(content=encode(recipe))


@router.delete("/recipes/{recipe_id}")
async def delete_recipe(
    recipe_id: int = Depends(parse_recipe_id), gateway: RecipeGateway = Depends(get_gateway)
) -> Response:
    await gateway.delete(recipe_id)
    return Response(content=encode("Recipe deleted"))

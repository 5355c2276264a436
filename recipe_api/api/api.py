from fastapi import APIRouter

from recipe_api.api.endpoints import recipes

api_router = APIRouter()
api_router.include_router(recipes.router, tags=["Recipes"])

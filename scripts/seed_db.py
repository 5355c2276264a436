import asyncio
import json
import sys
import os
from pathlib import Path
from sqlalchemy import delete

sys.path.append(os.getcwd())

from recipe_api.core.config import settings
from recipe_api.db.session import create_engine
from recipe_api.models import Recipe
from recipe_api.schemas.codec import decode
from recipe_api.services.recipe_service import RecipeGateway

BASE_DIR = Path(__file__).parents[1]
RECIPES_PATH = BASE_DIR / "datasets" / "recipe_samples.json"

async def seed():
    print("Seeding database...")

    engine = create_engine(settings)
    gateway = RecipeGateway(engine)
    try:
        await gateway.ensure_schema()

        async with gateway.session_factory() as db:
            print(" - Cleaning old data...")
            await db.execute(delete(Recipe))
            await db.commit()

        print(" - Loading recipes...")
        with open(RECIPES_PATH) as f:
            recipes_data = json.load(f)

        for r_data in recipes_data:
            recipe_in = decode(json.dumps(r_data).encode())
            await gateway.insert(recipe_in.name, recipe_in.ingredients, recipe_in.instructions)

        print(f"Successfully inserted {len(recipes_data)} recipes.")
    finally:
        await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed())

import logging
from typing import Sequence

from sqlalchemy import delete, insert, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.future import select

from recipe_api.core.errors import NotFound, QueryError, StartupError
from recipe_api.db.session import create_session_factory
from recipe_api.models import Base, Recipe

logger = logging.getLogger(__name__)


class RecipeGateway:
    """SQL access to the ``recipes`` table.

    Each call opens a short-lived session on the shared engine pool, so one
    gateway instance serves every request for the lifetime of the process.
    Store failures surface as ``QueryError``; statements that match no row
    surface as ``NotFound``.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    async def ensure_schema(self) -> None:
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as exc:
            raise StartupError(f"Could not create recipes table: {exc}") from exc
        logger.info("Recipes table is ready")

    async def list_all(self) -> Sequence[Recipe]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(Recipe))
                return result.scalars().all()
        except (SQLAlchemyError, OSError) as exc:
            raise QueryError(f"Error querying recipes: {exc}") from exc

    async def get_by_id(self, recipe_id: int) -> Recipe:
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(Recipe).where(Recipe.id == recipe_id))
                recipe = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as exc:
            raise QueryError(f"Error querying recipe {recipe_id}: {exc}") from exc
        if recipe is None:
            raise NotFound(recipe_id)
        return recipe

    async def insert(self, name: str, ingredients: list[str], instructions: str) -> int:
        stmt = (
            insert(Recipe)
            .values(name=name, ingredients=ingredients, instructions=instructions)
            .returning(Recipe.id)
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                recipe_id = result.scalar_one()
                await session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise QueryError(f"Error inserting recipe: {exc}") from exc
        return recipe_id

    async def update(self, recipe_id: int, name: str, ingredients: list[str], instructions: str) -> None:
        stmt = (
            update(Recipe)
            .where(Recipe.id == recipe_id)
            .values(name=name, ingredients=ingredients, instructions=instructions)
            .execution_options(synchronize_session=False)
        )
        await self._execute_for_row(stmt, recipe_id, "updating")

    async def delete(self, recipe_id: int) -> None:
        stmt = (
            delete(Recipe)
            .where(Recipe.id == recipe_id)
            .execution_options(synchronize_session=False)
        )
        await self._execute_for_row(stmt, recipe_id, "deleting")

    async def _execute_for_row(self, stmt, recipe_id: int, action: str) -> None:
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                affected = result.rowcount
                await session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise QueryError(f"Error {action} recipe {recipe_id}: {exc}") from exc
        if affected == 0:
            raise NotFound(recipe_id)

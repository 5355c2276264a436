import os

import pytest
from sqlalchemy import delete
from sqlalchemy.engine import make_url
from sqlalchemy_utils import database_exists, create_database

from recipe_api.core.config import Settings
from recipe_api.db.session import create_engine
from recipe_api.models import Recipe
from recipe_api.services.recipe_service import RecipeGateway

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "")


def pytest_collection_modifyitems(config, items):
    if TEST_DATABASE_URL:
        return
    skip = pytest.mark.skip(reason="TEST_DATABASE_URL is not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return Settings(DATABASE_URL=TEST_DATABASE_URL)


@pytest.fixture(scope="session")
def prepare_db(test_settings):
    sync_url = make_url(test_settings.DATABASE_URL).set(drivername="postgresql+psycopg2")
    if not database_exists(sync_url):
        create_database(sync_url)


@pytest.fixture
async def recipe_gateway(prepare_db, test_settings):
    engine = create_engine(test_settings)
    gateway = RecipeGateway(engine)
    await gateway.ensure_schema()
    async with gateway.session_factory() as session:
        await session.execute(delete(Recipe))
        await session.commit()

    yield gateway

    await engine.dispose()

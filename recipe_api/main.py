import sys
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from recipe_api.api.api import api_router
from recipe_api.core.config import settings
from recipe_api.core.errors import StartupError, register_exception_handlers
from recipe_api.core.middleware import json_content_type
from recipe_api.db.session import create_engine
from recipe_api.services.recipe_service import RecipeGateway

logger = logging.getLogger(__name__)

logging.basicConfig(level=settings.LOG_LEVEL, handlers=[logging.StreamHandler(sys.stdout)])


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = create_engine(settings)
    gateway = RecipeGateway(engine)
    try:
        await gateway.ensure_schema()
    except StartupError:
        logger.critical("Aborting startup, the recipe store is unavailable")
        await engine.dispose()
        raise

    app.state.gateway = gateway
    yield
    await engine.dispose()


app = FastAPI(title="Recipe API", version="1.0.0", lifespan=lifespan)

app.add_middleware(BaseHTTPMiddleware, dispatch=json_content_type)
register_exception_handlers(app)

app.include_router(api_router)


@app.get("/", include_in_schema=False)
def read_root():
    return FileResponse(settings.STATIC_DIR / "index.html", media_type="text/html")


# Unmatched paths fall through to the frontend assets
app.mount("/", StaticFiles(directory=settings.STATIC_DIR), name="public")

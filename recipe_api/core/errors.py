import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class RecipeAPIError(Exception):
    """Base class for errors raised while serving recipes."""


class DecodeError(RecipeAPIError):
    """The request body is not a JSON recipe object."""


class NotFound(RecipeAPIError):
    """No recipe row matches the requested id."""

    def __init__(self, recipe_id: int | str) -> None:
        super().__init__(f"Recipe {recipe_id} not found")
        self.recipe_id = recipe_id


class QueryError(RecipeAPIError):
    """The store could not be reached or failed to execute a statement."""


class StartupError(RecipeAPIError):
    """The store connection or schema could not be established at startup."""


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    logger.info("%s %s: %s %s", request.method, request.url.path, exc.status_code, exc.detail)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def decode_error_handler(request: Request, exc: DecodeError) -> Response:
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=400)


async def not_found_handler(request: Request, exc: NotFound) -> Response:
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return Response(status_code=404)


async def query_error_handler(request: Request, exc: QueryError) -> Response:
    logger.error("%s %s: %s", request.method, request.url.path, exc, exc_info=exc.__cause__)
    return Response(status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(DecodeError, decode_error_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(QueryError, query_error_handler)

from typing import Awaitable, Callable

from fastapi import Request, Response

JSON_CONTENT_TYPE = "application/json"


async def json_content_type(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Default every response to JSON unless the handler chose its own type."""
    response = await call_next(request)
    response.headers.setdefault("content-type", JSON_CONTENT_TYPE)
    return response

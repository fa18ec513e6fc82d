"""request_context_dependency() — FastAPI dependency building a RequestContext."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import Request

from fastapi_request_context.context import RequestContext
from fastapi_request_context.exceptions import InvalidArgument
from fastapi_request_context.settings import RequestSettings
from fastapi_request_context.transport import StarletteTransport


def request_context_dependency(
    *,
    base_url: str | None = None,
    settings: RequestSettings | None = None,
) -> Callable[..., Awaitable[RequestContext]]:
    """Return a FastAPI dependency building one RequestContext per request."""
    if base_url is not None and not isinstance(base_url, str):
        raise InvalidArgument("baseUrl must be a string", argument="base_url")

    async def dependency(request: Request) -> RequestContext:
        transport = await StarletteTransport.from_request(request)
        return RequestContext(transport=transport, base_url=base_url, settings=settings)

    return dependency

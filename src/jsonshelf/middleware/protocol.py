"""The middleware contract.

A middleware receives the request and the rest of the pipeline, and
returns a Response; it may answer on its own (CORS preflight) or
decorate whatever ``next`` returned. Plain ``async def`` functions
qualify, no base class needed.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from jsonshelf.http.request import Request
from jsonshelf.http.response import Response

type Next = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """Shape of a middleware callable::

        async def no_store(request: Request, next: Next) -> Response:
            response = await next(request)
            return response.with_header("Cache-Control", "no-store")
    """

    async def __call__(self, request: Request, next: Next) -> Response: ...

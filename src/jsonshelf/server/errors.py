"""Error mapping for the request pipeline.

Turns HTTPError exceptions and unexpected failures into empty-body JSON
responses. Details go to the log, never to the client.
"""

import logging

from jsonshelf.errors import HTTPError
from jsonshelf.http.request import Request
from jsonshelf.http.response import Response

logger = logging.getLogger("jsonshelf.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response carrying its status and headers."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
    response = Response(status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Log an unexpected exception and answer 500."""
    logger.error("500 %s %s", request.method, request.path, exc_info=exc)
    return Response(status=500)

"""The endpoint request handler.

Bound to the catch-all route: whatever follows the leading ``/`` is the
lookup key, used exactly as the server delivered it.
"""

import logging

from jsonshelf.http.response import Response
from jsonshelf.store import EndpointStore

logger = logging.getLogger("jsonshelf.server")

ENDPOINT_ROUTE = "/{path:path}"
ENDPOINT_METHODS = ["GET", "HEAD"]


def serve_endpoint(path: str, store: EndpointStore) -> Response:
    """Answer with the stored document for *path*, or an empty 404."""
    content = store.get(path)
    if content is None:
        logger.info("Endpoint not found: /%s", path)
        return Response(status=404)
    logger.info("Serving endpoint: /%s", path)
    return Response(body=content)

"""Server startup.

Starts a pounce ASGI server with the live jsonshelf App. Multi-worker by
default: every worker shares the same App and therefore the same
read-only EndpointStore.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonshelf.app import App

logger = logging.getLogger("jsonshelf.server")


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    workers: int = 0,
    log_level: str = "info",
) -> None:
    """Serve *app* until the process is stopped.

    Args:
        app: jsonshelf App instance (already holding its endpoint table).
        host: Bind address.
        port: Bind port.
        workers: Worker count (0 = auto-detect from CPU count).
        log_level: pounce log level (debug, info, warning, error, critical).

    A failure to bind the listening socket is logged and the function
    returns normally, so the process exits cleanly.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
    )
    server = Server(config, app)

    logger.info("Serving %d endpoint(s) on http://%s:%d", len(app.store), host, port)
    try:
        server.run()
    except OSError as exc:
        logger.error("Error starting the server on %s:%d: %s", host, port, exc)

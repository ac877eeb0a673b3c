"""Application factory — from a ServerConfig to a ready-to-serve App.

Loads the endpoint table first; if that raises, no App exists and no
socket is ever opened.
"""

import logging

from jsonshelf._internal.types import SeedProvider
from jsonshelf.app import App
from jsonshelf.assets import index_json
from jsonshelf.config import ServerConfig
from jsonshelf.endpoints import ENDPOINT_METHODS, ENDPOINT_ROUTE, serve_endpoint
from jsonshelf.middleware.cors import CORSMiddleware
from jsonshelf.scanner import scan_directories
from jsonshelf.store import EndpointStore

logger = logging.getLogger("jsonshelf")


def create_app(config: ServerConfig, *, seed: SeedProvider = index_json) -> App:
    """Scan ``config.json_directories`` and wire the serving App.

    Raises:
        ScanError: If any directory or file could not be loaded.
    """
    store = EndpointStore(scan_directories(config.json_directories, seed=seed))
    logger.info("Loaded %d endpoint(s): %s", len(store), ", ".join(sorted(store.keys())))

    app = App(config, store=store)
    app.add_middleware(CORSMiddleware())
    app.route(ENDPOINT_ROUTE, methods=ENDPOINT_METHODS, name="endpoint")(serve_endpoint)
    return app

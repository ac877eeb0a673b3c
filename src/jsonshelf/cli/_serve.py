"""Startup sequence behind the ``jsonshelf`` command.

Every startup failure (bad config, unreadable or uncreatable directory,
unreadable file) is reported as one diagnostic and exits with status 1
before any socket is opened.
"""

import argparse
import logging
import sys
from dataclasses import replace

from jsonshelf.config import resolve_config
from jsonshelf.errors import JsonShelfError

logger = logging.getLogger("jsonshelf.cli")

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Route logging to stderr at *level*."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def serve(args: argparse.Namespace) -> None:
    """Resolve the config, build the app and hand it to the server.

    ``--log-level`` wins over the config file's ``log_level``.
    """
    configure_logging(args.log_level or "info")

    try:
        config = resolve_config(args.config)
        if args.log_level is not None:
            config = replace(config, log_level=args.log_level)
        logging.getLogger().setLevel(config.log_level.upper())

        from jsonshelf.factory import create_app

        app = create_app(config)
    except JsonShelfError as exc:
        logger.error("Startup failed: %s", exc)
        raise SystemExit(1) from exc

    app.run()

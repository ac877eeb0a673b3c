"""jsonshelf CLI — load the config, build the endpoint table, serve it.

Entry point registered as ``jsonshelf`` in ``pyproject.toml``::

    [project.scripts]
    jsonshelf = "jsonshelf.cli:main"
"""

import argparse

from jsonshelf import __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``jsonshelf`` command."""
    parser = argparse.ArgumentParser(
        prog="jsonshelf",
        description="Serve every JSON file in the configured directories over HTTP.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Path to the config file (default: ./config.json, created if missing)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        default=None,
        help="Override the config's log level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    from jsonshelf.cli._serve import serve

    serve(args)

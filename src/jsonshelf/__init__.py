"""jsonshelf — serve a directory of JSON files as a read-only HTTP API.

At startup every top-level ``.json`` file in the configured directories
is loaded into memory; afterwards ``GET /<dir>/<name>`` answers with the
content of ``<dir>/<name>.json`` and ``GET /<dir>`` with
``<dir>/index.json``.

Basic usage::

    from jsonshelf import ServerConfig, create_app

    app = create_app(ServerConfig(json_directories=("./json",)))
    app.run()

Or from the command line::

    jsonshelf                # uses ./config.json, created if missing
    jsonshelf other.json
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "App",
    "ConfigurationError",
    "EndpointStore",
    "HTTPError",
    "JsonShelfError",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "ScanError",
    "ServerConfig",
    "create_app",
    "scan_directories",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import jsonshelf`` fast while providing a clean top-level API.
    """
    if name == "App":
        from jsonshelf.app import App

        return App

    if name == "ServerConfig":
        from jsonshelf.config import ServerConfig

        return ServerConfig

    if name == "EndpointStore":
        from jsonshelf.store import EndpointStore

        return EndpointStore

    if name == "create_app":
        from jsonshelf.factory import create_app

        return create_app

    if name == "scan_directories":
        from jsonshelf.scanner import scan_directories

        return scan_directories

    if name == "Request":
        from jsonshelf.http.request import Request

        return Request

    if name == "Response":
        from jsonshelf.http.response import Response

        return Response

    if name in (
        "ConfigurationError",
        "HTTPError",
        "JsonShelfError",
        "MethodNotAllowed",
        "NotFound",
        "ScanError",
    ):
        from jsonshelf import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

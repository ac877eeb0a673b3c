"""Server configuration.

ServerConfig is a frozen dataclass — immutable after loading, no
string-key dict lookups at runtime. The on-disk format is a small JSON
object::

    {
      "host": "localhost",
      "port": 3000,
      "json_directories": ["./json"]
    }
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonshelf.errors import ConfigurationError

logger = logging.getLogger("jsonshelf.config")

DEFAULT_CONFIG_PATH = "config.json"

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    Defaults match the file written on first run::

        config = ServerConfig(port=8080, json_directories=("./api",))
    """

    host: str = "localhost"
    port: int = 3000
    json_directories: tuple[str, ...] = ("./json",)

    # 0 = let pounce pick the worker count from the CPU count
    workers: int = 0
    log_level: str = "info"

    def to_dict(self) -> dict[str, Any]:
        """The config-file representation (only the required keys)."""
        return {
            "host": self.host,
            "port": self.port,
            "json_directories": list(self.json_directories),
        }


def parse_config(data: Any, *, source: str = "<config>") -> ServerConfig:
    """Validate a decoded config object and build a ``ServerConfig``.

    Raises ``ConfigurationError`` naming *source* and the offending field.
    Unknown keys are ignored.
    """
    if not isinstance(data, dict):
        msg = f"{source}: expected a JSON object, got {type(data).__name__}"
        raise ConfigurationError(msg)

    for key in ("host", "port", "json_directories"):
        if key not in data:
            msg = f"{source}: missing required field {key!r}"
            raise ConfigurationError(msg)

    host = data["host"]
    if not isinstance(host, str):
        msg = f"{source}: 'host' must be a string"
        raise ConfigurationError(msg)

    port = data["port"]
    # bool is an int subclass; true/false is never a valid port
    if not isinstance(port, int) or isinstance(port, bool) or not 0 <= port <= 65535:
        msg = f"{source}: 'port' must be an integer between 0 and 65535, got {port!r}"
        raise ConfigurationError(msg)

    directories = data["json_directories"]
    if not isinstance(directories, list) or not all(isinstance(d, str) for d in directories):
        msg = f"{source}: 'json_directories' must be a list of strings"
        raise ConfigurationError(msg)

    workers = data.get("workers", 0)
    if not isinstance(workers, int) or isinstance(workers, bool) or workers < 0:
        msg = f"{source}: 'workers' must be a non-negative integer, got {workers!r}"
        raise ConfigurationError(msg)

    log_level = data.get("log_level", "info")
    if not isinstance(log_level, str) or log_level.lower() not in _LOG_LEVELS:
        msg = f"{source}: 'log_level' must be one of {', '.join(_LOG_LEVELS)}"
        raise ConfigurationError(msg)

    return ServerConfig(
        host=host,
        port=port,
        json_directories=tuple(directories),
        workers=workers,
        log_level=log_level.lower(),
    )


def load_config(path: str | Path) -> ServerConfig:
    """Read and validate a config file.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid
            JSON, or fails validation.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read config file {str(path)!r}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"{path}: invalid JSON ({exc})"
        raise ConfigurationError(msg) from exc

    return parse_config(data, source=str(path))


def write_default_config(path: str | Path) -> ServerConfig:
    """Write the default config to *path* and return it."""
    config = ServerConfig()
    path = Path(path)
    try:
        path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot write default config file {str(path)!r}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc
    logger.info("Created default config file %s", path)
    return config


def resolve_config(path: str | Path | None = None) -> ServerConfig:
    """Load the config the CLI should run with.

    An explicit *path* must exist. Without one, ``./config.json`` is
    used and created with defaults when missing.
    """
    if path is not None:
        return load_config(path)
    default = Path(DEFAULT_CONFIG_PATH)
    if not default.exists():
        return write_default_config(default)
    return load_config(default)

"""Endpoint discovery for configured JSON directories.

Walks the top level of each directory (no recursion) and loads every
``.json`` file into the endpoint table:

- ``index.json`` maps to the directory path itself
- any other ``name.json`` maps to ``<directory>/name``

A leading ``./`` is stripped from the directory when forming keys, so
``./json/users.json`` is served at ``GET /json/users``.

Directories are processed in configured order and entries within a
directory in sorted name order. When two files derive the same key the
later one wins.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from jsonshelf._internal.types import SeedProvider
from jsonshelf.assets import index_json
from jsonshelf.errors import ScanError, ScanFailure

logger = logging.getLogger("jsonshelf.scanner")

INDEX_STEM = "index"
JSON_SUFFIX = ".json"


def strip_dot_slash(directory: str) -> str:
    """Remove every leading ``./`` from a directory string."""
    while directory.startswith("./"):
        directory = directory[2:]
    return directory


def endpoint_key(directory: str, stem: str) -> str:
    """Derive the endpoint key for ``<directory>/<stem>.json``.

    Examples::

        endpoint_key("./json", "index")  -> "json"
        endpoint_key("./json", "users")  -> "json/users"
        endpoint_key("data/v1", "items") -> "data/v1/items"
    """
    base = strip_dot_slash(directory)
    if stem == INDEX_STEM:
        return base
    return f"{base}/{stem}"


def scan_directories(
    directories: Iterable[str],
    *,
    seed: SeedProvider = index_json,
) -> dict[str, bytes]:
    """Build the endpoint table from *directories*.

    Missing directories are created and seeded with an ``index.json``
    from *seed* before being scanned.

    Every failure across every directory is collected; if there were
    any, a single ``ScanError`` listing them all is raised and no table
    is returned.
    """
    table: dict[str, bytes] = {}
    failures: list[ScanFailure] = []

    for directory in directories:
        path = Path(directory)
        if not path.exists():
            if not _create_seeded(path, seed, failures):
                continue
        elif not path.is_dir():
            failures.append(ScanFailure(directory, "not a directory"))
            continue
        scan_directory(directory, table, failures)

    if failures:
        raise ScanError(failures)

    logger.debug("Endpoint table built with %d endpoint(s)", len(table))
    return table


def scan_directory(
    directory: str,
    table: dict[str, bytes],
    failures: list[ScanFailure],
) -> None:
    """Load the top-level JSON files of one directory into *table*."""
    path = Path(directory)
    try:
        entries = sorted(path.iterdir())
    except OSError as exc:
        failures.append(ScanFailure(directory, f"cannot read directory: {exc.strerror or exc}"))
        return

    for item in entries:
        # is_file() follows symlinks; subdirectories are never descended
        if not item.is_file():
            continue
        if item.suffix != JSON_SUFFIX:
            continue

        try:
            content = item.read_bytes()
        except OSError as exc:
            failures.append(ScanFailure(str(item), f"cannot read file: {exc.strerror or exc}"))
            continue

        key = endpoint_key(directory, item.stem)
        if key in table:
            logger.warning("Endpoint %r redefined by %s", key, item)
        table[key] = content
        logger.debug("Loaded %s as endpoint %r (%d bytes)", item, key, len(content))


def _create_seeded(path: Path, seed: SeedProvider, failures: list[ScanFailure]) -> bool:
    """Create a missing directory and write its seed ``index.json``.

    Returns False (after recording the failure) if either step fails.
    """
    try:
        path.mkdir()
    except OSError as exc:
        failures.append(ScanFailure(str(path), f"cannot create directory: {exc.strerror or exc}"))
        return False

    content = seed()
    data = content.encode("utf-8") if isinstance(content, str) else content
    index_file = path / f"{INDEX_STEM}{JSON_SUFFIX}"
    try:
        index_file.write_bytes(data)
    except OSError as exc:
        reason = f"cannot write seed file: {exc.strerror or exc}"
        failures.append(ScanFailure(str(index_file), reason))
        return False

    logger.info("Created directory %s with default %s", path, index_file.name)
    return True

"""Shared fixtures: an isolated working directory with JSON files in it."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory.

    Config directories like ``./json`` resolve relative to it.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_json(workdir: Path) -> Callable[[str, str | bytes], Path]:
    """Write a file under the working directory, creating parents."""

    def _write(relative: str, content: str | bytes) -> Path:
        path = workdir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
        return path

    return _write

"""Shared type aliases used across jsonshelf modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — function with variable signature, resolved by introspection
Handler: TypeAlias = Callable[..., Any]

# Seed provider — returns the default document for a freshly created directory
SeedProvider: TypeAlias = Callable[[], str | bytes]

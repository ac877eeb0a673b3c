"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Route:
    """A registered handler for a path pattern and a set of methods.

    ``path`` is a static path such as ``/health``, optionally ending in a
    catch-all segment: ``/{path:path}``.
    """

    path: str
    handler: Callable[..., Any]
    methods: frozenset[str]
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """The route chosen for a request and the parameters it captured."""

    route: Route
    path_params: Mapping[str, str]

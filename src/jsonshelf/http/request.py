"""Immutable HTTP request.

jsonshelf only serves reads, so a request is the routing metadata
frozen at creation: method, path and headers. The body is never read.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from jsonshelf._internal.asgi import Scope


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the ASGI ``scope["path"]``: already percent-decoded by
    the server, otherwise untouched. ``headers`` is keyed by lowercased
    name; a repeated header keeps its first value.
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    path_params: Mapping[str, str] = field(default_factory=dict)

    def with_path_params(self, path_params: Mapping[str, str]) -> "Request":
        """Return a copy carrying the params captured by the router."""
        return replace(self, path_params=path_params)

    @classmethod
    def from_asgi(cls, scope: Scope) -> "Request":
        """Create a Request from an ASGI HTTP scope."""
        headers: dict[str, str] = {}
        for name, value in scope.get("headers", ()):
            headers.setdefault(name.decode("latin-1").lower(), value.decode("latin-1"))
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=MappingProxyType(headers),
        )

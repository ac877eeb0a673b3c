"""Compiled router: a trie of static segments with catch-all edges.

A catch-all ``{name:path}`` may only end a route. It captures the rest
of the request path exactly as received, so doubled or trailing
slashes survive and ``/`` captures the empty string. Static segments
are always preferred over a catch-all at the same depth.
"""

from jsonshelf.errors import ConfigurationError, MethodNotAllowed, NotFound
from jsonshelf.routing.route import Route, RouteMatch

CATCH_ALL_SUFFIX = ":path}"


def split_route_path(path: str) -> tuple[list[str], str | None]:
    """Split a route pattern into static segments and a catch-all name.

    Examples::

        "/json/users"   -> (["json", "users"], None)
        "/{path:path}"  -> ([], "path")
        "/api/{rest:path}" -> (["api"], "rest")
    """
    parts = [part for part in path.strip("/").split("/") if part]
    catch_all = None
    if parts and parts[-1].startswith("{") and parts[-1].endswith(CATCH_ALL_SUFFIX):
        catch_all = parts.pop()[1 : -len(CATCH_ALL_SUFFIX)]
        if not catch_all:
            msg = f"Route {path!r}: the catch-all parameter needs a name"
            raise ConfigurationError(msg)

    for part in parts:
        if "{" in part or "}" in part:
            msg = f"Route {path!r}: only a trailing {{name:path}} parameter is supported"
            raise ConfigurationError(msg)
    return parts, catch_all


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("catch_all_name", "catch_all_routes", "children", "routes_by_method")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.routes_by_method: dict[str, Route] = {}
        self.catch_all_name: str | None = None
        self.catch_all_routes: dict[str, Route] = {}


class Router:
    """Method-aware path router.

    Usage::

        router = Router()
        router.add(Route("/{path:path}", handler, frozenset({"GET"})))
        router.compile()
        router.match("GET", "/json/users").path_params  # {"path": "json/users"}
    """

    __slots__ = ("_compiled", "_root")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        segments, catch_all = split_route_path(route.path)
        node = self._root
        for segment in segments:
            node = node.children.setdefault(segment, _TrieNode())

        if catch_all is None:
            target = node.routes_by_method
        else:
            if node.catch_all_name not in (None, catch_all):
                msg = (
                    f"Route {route.path!r}: conflicting catch-all names "
                    f"{node.catch_all_name!r} and {catch_all!r}"
                )
                raise ConfigurationError(msg)
            node.catch_all_name = catch_all
            target = node.catch_all_routes
        for method in route.methods:
            target[method] = route

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the route for *method* and *path*.

        Raises ``NotFound`` if no route matches the path and
        ``MethodNotAllowed`` if it matches for other methods only.
        """
        rest = path[1:] if path.startswith("/") else path
        found = self._match_node(self._root, rest)
        if found is None:
            raise NotFound(f"No route matches {method} {path!r}")

        routes_by_method, params = found
        if method in routes_by_method:
            return RouteMatch(route=routes_by_method[method], path_params=params)
        raise MethodNotAllowed(frozenset(routes_by_method))

    def _match_node(
        self, node: _TrieNode, rest: str
    ) -> tuple[dict[str, Route], dict[str, str]] | None:
        if not rest and node.routes_by_method:
            return node.routes_by_method, {}

        if rest:
            part, _, remainder = rest.partition("/")
            child = node.children.get(part)
            if child is not None:
                found = self._match_node(child, remainder)
                if found is not None:
                    return found

        if node.catch_all_name is not None:
            return node.catch_all_routes, {node.catch_all_name: rest}
        return None

"""EndpointStore — the immutable endpoint table shared by all requests.

Built once at startup and never mutated afterwards, so readers need no
lock: every worker reads the same read-only snapshot by reference.

Thread safety:
    The constructor copies the table and wraps the copy in a
    ``MappingProxyType``. Nothing holds a writable reference, so
    concurrent ``get()`` calls from any number of worker threads are
    plain dict reads.
"""

from collections.abc import KeysView, Mapping
from types import MappingProxyType


class EndpointStore:
    """Read-only mapping from endpoint key to raw JSON content.

    Usage::

        store = EndpointStore(scan_directories(["./json"]))
        store.get("json/users")  # -> b'[...]' or None
    """

    __slots__ = ("_table",)

    def __init__(self, table: Mapping[str, bytes] | None = None) -> None:
        self._table: Mapping[str, bytes] = MappingProxyType(dict(table or {}))

    def get(self, key: str) -> bytes | None:
        """Return the content stored under *key*, or ``None`` if absent."""
        return self._table.get(key)

    def keys(self) -> KeysView[str]:
        """All endpoint keys, for startup logging and introspection."""
        return self._table.keys()

    @property
    def snapshot(self) -> Mapping[str, bytes]:
        """The read-only table itself."""
        return self._table

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"EndpointStore({len(self._table)} endpoints)"

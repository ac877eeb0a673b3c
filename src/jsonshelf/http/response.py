"""HTTP response with a chainable ``.with_header()`` API.

Every response jsonshelf produces is JSON, so that is the default
content type. Bodies are raw bytes: stored documents are sent exactly
as they were read from disk.
"""

from dataclasses import dataclass, replace

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations::

        Response(b'{"ok": true}').with_header("Cache-Control", "no-cache")
        Response(status=404)  # empty JSON 404
    """

    body: bytes = b""
    status: int = 200
    content_type: str = JSON_CONTENT_TYPE
    headers: tuple[tuple[str, str], ...] = ()

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), if set."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None

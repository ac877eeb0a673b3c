"""jsonshelf exception hierarchy.

Shared across config loading, the directory scanner, the router and the
ASGI handler so every module raises and catches the same types.
"""

from dataclasses import dataclass


class JsonShelfError(Exception):
    """Base for all jsonshelf-specific errors."""


class ConfigurationError(JsonShelfError):
    """Raised when the server configuration is invalid or unreadable.

    Fatal at startup: the CLI reports it and exits before binding.
    """


@dataclass(frozen=True, slots=True)
class ScanFailure:
    """One problem found while building the endpoint table."""

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class ScanError(JsonShelfError):
    """Raised once after a scan when any directory or file failed.

    Carries every failure so startup reports them all in one diagnostic
    instead of stopping at the first.
    """

    def __init__(self, failures: list[ScanFailure]) -> None:
        self.failures: tuple[ScanFailure, ...] = tuple(failures)
        lines = "\n".join(f"  - {failure}" for failure in self.failures)
        count = len(self.failures)
        super().__init__(f"Failed to load JSON directories ({count} error(s)):\n{lines}")


@dataclass(frozen=True, slots=True)
class HTTPError(JsonShelfError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or handlers. The ASGI handler catches these and
    turns them into an empty-body response carrying ``headers``.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        # the generated __init__ bypasses BaseException's, leaving args empty
        BaseException.__init__(self, self.status, self.detail)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — route exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )

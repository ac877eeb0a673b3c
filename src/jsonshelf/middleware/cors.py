"""CORS middleware.

Handles preflight requests and adds CORS headers to every response of a
cross-origin request. The server ships one fixed policy,
``PERMISSIVE_CORS``: any origin, any method, any header, and preflight
results cached for an hour.
"""

from dataclasses import dataclass

from jsonshelf.http.request import Request
from jsonshelf.http.response import Response
from jsonshelf.middleware.protocol import Next

WILDCARD = "*"


@dataclass(frozen=True, slots=True)
class CORSConfig:
    """CORS policy.

    ``"*"`` in ``allow_methods`` or ``allow_headers`` echoes whatever the
    preflight asked for. ``"*"`` in ``allow_origins`` answers with a
    literal ``*`` (credentials are never allowed).
    """

    allow_origins: tuple[str, ...] = ()
    allow_methods: tuple[str, ...] = ("GET", "HEAD", "OPTIONS")
    allow_headers: tuple[str, ...] = ()
    max_age: int = 600


PERMISSIVE_CORS = CORSConfig(
    allow_origins=(WILDCARD,),
    allow_methods=(WILDCARD,),
    allow_headers=(WILDCARD,),
    max_age=3600,
)


class CORSMiddleware:
    """Standards-compliant CORS middleware.

    Handles:
    - Preflight ``OPTIONS`` requests (answered here with 204, never routed)
    - Actual requests (CORS headers added to whatever the handler returned)

    Requests without an ``Origin`` header pass through untouched.
    """

    __slots__ = ("config",)

    def __init__(self, config: CORSConfig = PERMISSIVE_CORS) -> None:
        self.config = config

    def _is_allowed_origin(self, origin: str) -> bool:
        if WILDCARD in self.config.allow_origins:
            return True
        return origin in self.config.allow_origins

    def _add_origin_headers(self, response: Response, origin: str) -> Response:
        if WILDCARD in self.config.allow_origins:
            return response.with_header("Access-Control-Allow-Origin", WILDCARD)
        return response.with_header("Access-Control-Allow-Origin", origin).with_header(
            "Vary", "Origin"
        )

    def _preflight_response(self, request: Request, origin: str) -> Response:
        cfg = self.config
        response = self._add_origin_headers(Response(status=204), origin)

        request_method = request.headers.get("access-control-request-method")
        if request_method:
            if WILDCARD in cfg.allow_methods:
                methods = request_method
            else:
                methods = ", ".join(cfg.allow_methods)
            response = response.with_header("Access-Control-Allow-Methods", methods)

        request_headers = request.headers.get("access-control-request-headers")
        if WILDCARD in cfg.allow_headers:
            if request_headers:
                response = response.with_header("Access-Control-Allow-Headers", request_headers)
        elif cfg.allow_headers:
            response = response.with_header(
                "Access-Control-Allow-Headers", ", ".join(cfg.allow_headers)
            )

        return response.with_header("Access-Control-Max-Age", str(cfg.max_age))

    async def __call__(self, request: Request, next: Next) -> Response:
        """Process the request with CORS handling."""
        origin = request.headers.get("origin")

        # No Origin header — not a CORS request
        if origin is None or not self._is_allowed_origin(origin):
            return await next(request)

        if request.method == "OPTIONS":
            return self._preflight_response(request, origin)

        response = await next(request)
        return self._add_origin_headers(response, origin)

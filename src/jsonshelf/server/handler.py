"""ASGI handler — translates ASGI scope/messages to jsonshelf types.

The only component that touches raw ASGI directly. Converts the scope
to a Request, dispatches through middleware and routing, and sends the
Response back through ASGI send().

Routing and handler errors become responses inside the middleware
chain, so middleware (CORS in particular) sees and decorates 404, 405
and 500 responses like any other.
"""

import inspect
from collections.abc import Callable, Mapping
from typing import Any

from jsonshelf._internal.asgi import Receive, Scope, Send
from jsonshelf._internal.invoke import invoke
from jsonshelf.errors import HTTPError
from jsonshelf.http.request import Request
from jsonshelf.http.response import Response
from jsonshelf.middleware.protocol import Next
from jsonshelf.routing.route import RouteMatch
from jsonshelf.routing.router import Router
from jsonshelf.server.errors import handle_http_error, handle_internal_error
from jsonshelf.server.sender import send_response

type Providers = Mapping[type, Callable[[], Any]]


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: tuple[Callable[..., Any], ...],
    providers: Providers,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    async def dispatch(req: Request) -> Response:
        try:
            match = router.match(req.method, req.path)
            return await _invoke_handler(match, req, providers)
        except HTTPError as exc:
            return handle_http_error(exc, req)
        except Exception as exc:
            return handle_internal_error(exc, req)

    # Wrap middleware around the dispatch, first registered outermost
    handler: Next = dispatch
    for mw in reversed(middleware):

        async def make_next(req: Request, _mw: Any = mw, _next: Next = handler) -> Response:
            return await _mw(req, _next)

        handler = make_next

    try:
        response = await handler(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send, head=request.method == "HEAD")


async def _invoke_handler(match: RouteMatch, request: Request, providers: Providers) -> Response:
    """Call the matched route handler; it must return a Response."""
    request = request.with_path_params(match.path_params)
    kwargs = _build_handler_kwargs(match.route.handler, request, providers)
    result = await invoke(match.route.handler, **kwargs)
    if not isinstance(result, Response):
        msg = f"Handler returned {type(result).__name__}, expected Response"
        raise TypeError(msg)
    return result


def _build_handler_kwargs(
    handler: Callable[..., Any],
    request: Request,
    providers: Providers,
) -> dict[str, Any]:
    """Inspect the handler signature and build its kwargs.

    Resolution order:
    1. ``request`` parameter (by name or ``Request`` annotation)
    2. Path parameters (by name, passed as captured strings)
    3. App services (by type annotation, e.g. ``store: EndpointStore``)
    """
    sig = inspect.signature(handler, eval_str=True)
    kwargs: dict[str, Any] = {}

    for name, param in sig.parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name in request.path_params:
            kwargs[name] = request.path_params[name]
        elif param.annotation in providers:
            kwargs[name] = providers[param.annotation]()

    return kwargs

"""The jsonshelf ASGI application.

Two phases: during setup routes and middleware are collected; the first
request (or ``run()``, or ASGI lifespan startup) compiles them into a
read-only ``_Compiled`` bundle that every request then shares.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from jsonshelf._internal.asgi import Receive, Scope, Send
from jsonshelf._internal.types import Handler
from jsonshelf.config import ServerConfig
from jsonshelf.middleware.protocol import Middleware
from jsonshelf.routing.route import Route
from jsonshelf.routing.router import Router
from jsonshelf.server.handler import Providers, handle_request
from jsonshelf.store import EndpointStore


@dataclass(frozen=True, slots=True)
class _Compiled:
    """Everything the request path reads. Built once, never mutated."""

    router: Router
    middleware: tuple[Middleware, ...]
    providers: Providers


class App:
    """Routes plus middleware around one ``EndpointStore``.

    Any handler parameter annotated ``store: EndpointStore`` receives the
    app's store.

    Thread safety:
        Setup is single-threaded. ``freeze()`` takes a lock and checks
        twice, so concurrent first requests from several pounce workers
        compile the app exactly once. After that, requests only read
        ``_Compiled``.
    """

    __slots__ = ("_compiled", "_lock", "_middleware", "_routes", "config", "store")

    def __init__(
        self,
        config: ServerConfig | None = None,
        *,
        store: EndpointStore | None = None,
    ) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self.store: EndpointStore = store if store is not None else EndpointStore()
        self._routes: list[Route] = []
        self._middleware: list[Middleware] = []
        self._compiled: _Compiled | None = None
        self._lock = threading.Lock()

    # -- Setup --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Decorator registering *func* for *path*.

        Args:
            path: Static URL path, optionally ending in a catch-all
                ``{name:path}`` that captures the rest of the path.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Optional route name.
        """

        def decorator(func: Handler) -> Handler:
            self._check_setup()
            verbs = frozenset(method.upper() for method in methods or ["GET"])
            self._routes.append(Route(path, func, verbs, name))
            return func

        return decorator

    def add_middleware(self, middleware: Middleware) -> None:
        """Append *middleware*; the first one added runs outermost."""
        self._check_setup()
        self._middleware.append(middleware)

    def _check_setup(self) -> None:
        if self._compiled is not None:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and middleware before calling app.run()."
            )
            raise RuntimeError(msg)

    # -- Compilation --

    @property
    def frozen(self) -> bool:
        """Whether setup is over."""
        return self._compiled is not None

    def freeze(self) -> None:
        """Compile routes and middleware. Safe to call from any thread, any number of times."""
        if self._compiled is not None:
            return
        with self._lock:
            if self._compiled is None:
                self._compiled = self._compile()

    def _compile(self) -> _Compiled:
        router = Router()
        for route in self._routes:
            router.add(route)
        router.compile()
        return _Compiled(
            router=router,
            middleware=tuple(self._middleware),
            providers=MappingProxyType({EndpointStore: lambda: self.store}),
        )

    # -- Serving --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Compile the app and serve it with pounce until stopped."""
        from jsonshelf.server.run import run_server

        self.freeze()
        run_server(
            self,
            host or self.config.host,
            port if port is not None else self.config.port,
            workers=self.config.workers,
            log_level=self.config.log_level,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return

        self.freeze()
        compiled = self._compiled
        assert compiled is not None
        await handle_request(
            scope,
            receive,
            send,
            router=compiled.router,
            middleware=compiled.middleware,
            providers=compiled.providers,
        )

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        # The endpoint table is loaded before the server starts;
        # startup only has to compile.
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    self.freeze()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

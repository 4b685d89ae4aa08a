"""The bookshelf application object.

An ``App`` collects routes, middleware and lifecycle hooks while the
importing module sets it up. The first ASGI call, ``startup()`` or
``run()`` freezes it: the route table is compiled, the middleware chain
is built and further registration is refused.
"""

import dataclasses
import inspect
import logging
import threading
from collections.abc import Callable
from typing import Any

from bookshelf._internal.asgi import Receive, Scope, Send
from bookshelf.config import AppConfig
from bookshelf.logs import configure_logging
from bookshelf.middleware.protocol import Middleware, Next
from bookshelf.routing.route import Route
from bookshelf.routing.router import Router
from bookshelf.server.handler import handle_request

Handler = Callable[..., Any]
Hook = Callable[[], Any]


class App:
    """An ASGI 3.0 application serving a compiled route table.

    ``logger`` is the handle the app passes to its collaborators (the
    access log middleware, the resource handlers); it defaults to the
    ``bookshelf`` logger.

    Freezing happens once. Workers racing on their first request take a
    lock and re-check inside it, so exactly one of them compiles.
    """

    __slots__ = (
        "_lock",
        "_middleware",
        "_pipeline",
        "_router",
        "_routes",
        "_shutdown",
        "_startup",
        "config",
        "logger",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.logger = logger or logging.getLogger("bookshelf")
        self._routes: list[Route] = []
        self._middleware: list[Middleware] = []
        self._startup: list[Hook] = []
        self._shutdown: list[Hook] = []
        self._lock = threading.Lock()
        self._pipeline: Next | None = None
        self._router: Router | None = None

    @property
    def frozen(self) -> bool:
        return self._router is not None

    # -- Setup --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Decorator form of ``add_route``."""

        def register(handler: Handler) -> Handler:
            self.add_route(path, handler, methods=methods, name=name)
            return handler

        return register

    def add_route(
        self,
        path: str,
        handler: Handler,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> None:
        """Register *handler* for *path* under *methods* (``GET`` by default).

        The pattern is checked when the app freezes, together with the
        rest of the table.
        """
        self._check_open()
        verbs = frozenset(method.upper() for method in methods or ["GET"])
        self._routes.append(Route(path, handler, verbs, name))

    def add_middleware(self, middleware: Middleware) -> None:
        """Append *middleware*; the first one added sees the request first."""
        self._check_open()
        self._middleware.append(middleware)

    def on_startup(self, hook: Hook) -> Hook:
        """Run *hook* (sync or async) at startup, after the app freezes."""
        self._check_open()
        self._startup.append(hook)
        return hook

    def on_shutdown(self, hook: Hook) -> Hook:
        self._check_open()
        self._shutdown.append(hook)
        return hook

    # -- Lifecycle --

    def freeze(self) -> Router:
        """Compile routes and middleware if not done yet; return the router.

        Raises ``ConfigurationError`` for an invalid route table and leaves
        the app unfrozen.
        """
        if self._router is None:
            with self._lock:
                if self._router is None:
                    self._compile()
        assert self._router is not None
        return self._router

    async def startup(self) -> None:
        """Freeze, then run the startup hooks in registration order."""
        self.freeze()
        for hook in self._startup:
            await _run_hook(hook)

    async def shutdown(self) -> None:
        for hook in self._shutdown:
            await _run_hook(hook)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Configure logging, freeze, and serve with pounce until interrupted.

        A single reloading worker when ``config.debug`` is set, the
        multi-worker server otherwise.
        """
        from bookshelf.server.runner import serve

        config = dataclasses.replace(
            self.config,
            host=host or self.config.host,
            port=port or self.config.port,
        )
        configure_logging(config.log_level, config.log_format)
        self.freeze()
        serve(self, config, production=not config.debug)

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return
        self.freeze()
        assert self._pipeline is not None
        await self._pipeline(scope, receive, send)

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            event = (await receive())["type"]
            if event == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    self.logger.critical("startup failed: %s", exc)
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif event == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _compile(self) -> None:
        router = Router(method_not_allowed=self.config.method_not_allowed)
        for route in self._routes:
            router.add(route)
        router.compile()

        async def endpoint(scope: Scope, receive: Receive, send: Send) -> None:
            await handle_request(scope, receive, send, router=router)

        chain: Next = endpoint
        for middleware in reversed(self._middleware):
            chain = _link(middleware, chain)

        self._pipeline = chain
        self._router = router

    def _check_open(self) -> None:
        if self.frozen:
            msg = (
                "Cannot modify the app after it has started serving requests; "
                "register routes, middleware and hooks before it runs."
            )
            raise RuntimeError(msg)


def _link(middleware: Middleware, inner: Next) -> Next:
    async def step(scope: Scope, receive: Receive, send: Send) -> None:
        await middleware(scope, receive, send, inner)

    return step


async def _run_hook(hook: Hook) -> None:
    result = hook()
    if inspect.isawaitable(result):
        await result

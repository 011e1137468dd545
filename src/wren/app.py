"""The wren application.

An App collects routes and hooks while the program is being set up. On
its first request (or lifespan startup, or ``run()``) it freezes: routes
compile into a RouteTable, content types and the kida environment are
built, and from then on every request only reads that state.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from wren._internal.asgi import Receive, Scope, Send
from wren._internal.invoke import run_hooks
from wren.config import AppConfig
from wren.http.content_types import ContentTypes
from wren.routing.route import FunctionRoute
from wren.routing.table import RouteTable
from wren.server.handler import handle_request
from wren.server.output import OutputContext
from wren.templating.integration import create_environment

logger = logging.getLogger("wren.server")

type Hook = Callable[[], Any]


class App:
    """An ASGI application serving one route table.

    Routes from ``config.routes`` are merged with those registered through
    ``route()`` or ``add_route()``; registration wins for the same key::

        app = App(AppConfig(routes={"/": "index.html"}))

        @app.route("/now")
        def now(request, response):
            return "<p>now</p>"

    Registration is single-threaded setup work. Freezing takes a lock so
    concurrent first requests compile the app once.
    """

    __slots__ = (
        "_context",
        "_freeze_lock",
        "_frozen",
        "_pending_routes",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self._pending_routes: dict[Any, Any] = {}
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []
        self._context: OutputContext | None = None
        self._frozen = False
        self._freeze_lock = threading.Lock()

    # -- Setup --

    def route(self, path: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator registering a function route at *path*.

        The function receives ``(request, response)``. It returns the body
        as a string, or sends through ``response`` itself and returns
        ``None``::

            @app.route("/ping")
            async def ping(request, response):
                await response.send(200, {"Content-Type": "text/plain"}, "pong")
        """

        def register(func: Callable[..., Any]) -> Callable[..., Any]:
            self.add_route(path, FunctionRoute(func))
            return func

        return register

    def add_route(self, key: str | int, value: Any) -> None:
        """Route *key* (a path, or 403/404/500) to *value*.

        *value* may be any shape ``config.routes`` accepts.
        """
        self._check_not_frozen()
        self._pending_routes[key] = value

    def on_startup(self, func: Hook) -> Hook:
        """Run *func* at lifespan startup, before requests are served."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Run *func* at lifespan shutdown."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    @property
    def routes(self) -> RouteTable:
        """The compiled route table. Reading it freezes the app."""
        return self._compiled().routes

    # -- Serving --

    def run(
        self,
        host: str | None = None,
        port: int | None = None,
        *,
        app_path: str | None = None,
    ) -> None:
        """Freeze the app and serve it with pounce until interrupted.

        Args:
            host: Override ``config.host``.
            port: Override ``config.port``.
            app_path: ``"module:attribute"`` pounce re-imports on reload.
        """
        self._ensure_frozen()
        logging.getLogger("wren").setLevel(self.config.log_level.upper())

        from wren.server.dev import run_server

        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
            app_path=app_path,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3 entry point for ``lifespan`` and ``http`` scopes."""
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            context=self._compiled(),
            safe_directories=self.config.safe_directories,
            static_root=self.config.static_root,
        )

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        self._ensure_frozen()
        while True:
            message = await receive()
            match message["type"]:
                case "lifespan.startup":
                    try:
                        await run_hooks(self._startup_hooks)
                    except Exception as exc:
                        logger.exception("Startup hook failed")
                        await send({"type": "lifespan.startup.failed", "message": str(exc)})
                        return
                    await send({"type": "lifespan.startup.complete"})
                case "lifespan.shutdown":
                    await run_hooks(self._shutdown_hooks)
                    await send({"type": "lifespan.shutdown.complete"})
                    return

    # -- Freezing --

    def _compiled(self) -> OutputContext:
        self._ensure_frozen()
        assert self._context is not None
        return self._context

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if not self._frozen:
                self._freeze()

    def _freeze(self) -> None:
        # Caller holds _freeze_lock.
        routes = RouteTable.build(
            {**self.config.routes, **self._pending_routes},
            template_extension=self.config.template_extension,
        )
        self._context = OutputContext(
            routes=routes,
            content_types=ContentTypes(self.config.content_types),
            kida_env=create_environment(self.config),
        )
        self._frozen = True
        logger.debug("App frozen with %d routes", len(routes))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Routes and hooks must be registered before the app serves its first request"
            raise RuntimeError(msg)

"""Server entry point.

Starts a pounce ASGI server with the live wren App object. Wren only
answers requests; sockets, ports, and keep-alive belong to pounce.
"""

import logging

logger = logging.getLogger("wren.server")


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    app_path: str | None = None,
) -> None:
    """Start a pounce server with the given wren App.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but wren has a live ``App`` object. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: ASGI callable (wren App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on code changes (development only).
        app_path: Optional ``"module:attribute"`` import string.  When
            provided, pounce reimports the app on each reload cycle so
            that code changes on disk take effect immediately.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
    )
    server = Server(config, app, app_path=app_path)
    logger.info("Server running at http://%s:%d", host, port)
    server.run()

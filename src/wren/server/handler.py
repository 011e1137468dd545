"""ASGI handler — translates ASGI scope/messages to wren types.

The only component that touches raw ASGI directly. Builds the Request,
wraps ``send`` in a ResponseSink, and runs the dispatch state machine:

1. Look up the canonical path in the route table.
2. On a miss, a file-like path is served from disk if its directory is
   authorized (else the 403 page); a directory-like path gets the 404 page.
3. Resolve the chosen route into the response.
"""

import logging
from collections.abc import Collection
from pathlib import Path

from wren._internal.asgi import Receive, Scope, Send
from wren.http.request import Request
from wren.routing.paths import Location, classify, is_authorized, static_path
from wren.routing.route import FileRef, RouteValue
from wren.server.output import OutputContext, resolve_output
from wren.server.sender import ResponseSink

logger = logging.getLogger("wren.server")


def select_route(
    canonical: str,
    *,
    context: OutputContext,
    safe_directories: Collection[str] | None,
    static_root: str | Path = ".",
) -> tuple[RouteValue, int]:
    """Pick the route for *canonical* and the status to send it with."""
    route = context.routes.lookup(canonical)
    if route is not None:
        return route, 200

    if classify(canonical) is Location.FILE:
        if is_authorized(canonical, safe_directories):
            return FileRef(static_path(canonical, static_root)), 200
        return context.routes.resolve_with_fallback(403), 403

    return context.routes.resolve_with_fallback(404), 404


async def dispatch(
    request: Request,
    sink: ResponseSink,
    *,
    context: OutputContext,
    safe_directories: Collection[str] | None = None,
    static_root: str | Path = ".",
) -> None:
    """Route one request and write its response through *sink*."""
    route, status = select_route(
        request.canonical_path,
        context=context,
        safe_directories=safe_directories,
        static_root=static_root,
    )
    if status == 403:
        logger.info("403 %s %s — outside safe directories", request.method, request.path)
    await resolve_output(route, request, sink, context=context, status=status)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    context: OutputContext,
    safe_directories: Collection[str] | None = None,
    static_root: str | Path = ".",
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    sink = ResponseSink(send)

    await dispatch(
        request,
        sink,
        context=context,
        safe_directories=safe_directories,
        static_root=static_root,
    )

    if sink.response is not None:
        logger.debug("%d %s %s", sink.response.status, request.method, request.path)

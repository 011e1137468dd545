"""Output resolution — turns a route value into the request's response.

Pattern-matched dispatch on the tagged route value:

1. ``FileRef``       -> load file -> 200 + Content-Type from the extension
2. ``TemplateRef``   -> load file -> render with kida -> 200
3. ``FunctionRoute`` -> call ``handler(request, response)``:
   ``str`` / ``RenderedBody`` -> 200 with that body;
   ``None`` / ``HANDLED``     -> the handler wrote the response itself

Failures never escape to the ASGI server. A missing file renders the
``404`` route with status 404; any other failure renders the ``500``
route with status 500. A failing fallback page degrades to a bare status.
"""

import logging
from dataclasses import dataclass

from kida import Environment

from wren._internal.invoke import invoke
from wren.errors import FileNotFound
from wren.http.content_types import ContentTypes
from wren.http.request import Request
from wren.routing.route import FileRef, FunctionRoute, RouteValue, TemplateRef
from wren.routing.table import RouteTable
from wren.server.loader import load_file
from wren.server.sender import ResponseSink
from wren.templating.integration import render_source

logger = logging.getLogger("wren.server")


@dataclass(frozen=True, slots=True)
class RenderedBody:
    """A function route's body; the framework sends it."""

    body: str


class HandledByCaller:
    """A function route already wrote its response through the sink.

    Use the ``HANDLED`` singleton rather than creating instances.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "HANDLED"


HANDLED = HandledByCaller()

type FunctionResult = RenderedBody | HandledByCaller


@dataclass(frozen=True, slots=True)
class OutputContext:
    """Read-only state shared by every request, built when the app freezes."""

    routes: RouteTable
    content_types: ContentTypes
    kida_env: Environment


def function_result(value: object) -> FunctionResult | None:
    """Read a function route's return value.

    Returns ``None`` when the value is neither a body nor "handled" —
    a route-authoring defect the caller reports.
    """
    match value:
        case RenderedBody() | HandledByCaller():
            return value
        case str():
            return RenderedBody(value)
        case None:
            return HANDLED
        case _:
            return None


async def resolve_output(
    route: RouteValue,
    request: Request,
    sink: ResponseSink,
    *,
    context: OutputContext,
    status: int = 200,
) -> None:
    """Produce the response for *route*, sent with *status* on success."""
    try:
        await _render(route, request, sink, context=context, status=status)
    except FileNotFound as exc:
        logger.warning("404 %s %s — %s", request.method, request.path, exc)
        if not sink.committed:
            await _render_fallback(404, request, sink, context=context)
    except Exception:
        logger.exception("500 %s %s", request.method, request.path)
        # A handler may have written its response before failing.
        if not sink.committed:
            await _render_fallback(500, request, sink, context=context)


async def _render(
    route: RouteValue,
    request: Request,
    sink: ResponseSink,
    *,
    context: OutputContext,
    status: int,
) -> None:
    match route:
        case FileRef():
            content = await load_file(route.path)
            content_type = context.content_types.resolve(route.extension)
            await sink.send(status, {"Content-Type": content_type}, content)
        case TemplateRef():
            source = (await load_file(route.path)).decode("utf-8")
            rendered = render_source(context.kida_env, source, route.data)
            await sink.send(status, {}, rendered)
        case FunctionRoute():
            value = await invoke(route.handler, request, sink)
            match function_result(value):
                case RenderedBody(body=body):
                    await sink.send(status, {}, body)
                case HandledByCaller():
                    if not sink.committed:
                        logger.warning(
                            "Route %s for %s returned without writing a response",
                            route.name,
                            request.path,
                        )
                case None:
                    logger.warning(
                        "Route %s for %s returned %s; expected str or None. "
                        "No response was written.",
                        route.name,
                        request.path,
                        type(value).__name__,
                    )


async def _render_fallback(
    status: int,
    request: Request,
    sink: ResponseSink,
    *,
    context: OutputContext,
) -> None:
    """Render the status page for *status* without re-entering dispatch."""
    route = context.routes.resolve_with_fallback(status)
    try:
        await _render(route, request, sink, context=context, status=status)
    except Exception:
        logger.exception("The %d page could not be rendered", status)
        if not sink.committed:
            await sink.send(status)

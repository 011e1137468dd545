"""Wren — a small path router that serves files, templates, and functions.

Every request path is looked up in a route table. A route either names a
file on disk, names a kida template to render with some data, or is a
function that computes the response. Paths with no route fall back to
static files (optionally limited to a set of safe directories) or to the
configured 404 page.

Basic usage::

    from wren import App, AppConfig

    app = App(AppConfig(
        routes={
            "/about": "pages/about.html",
            "/hello": ("pages/hello.tpl", {"name": "World"}),
            404: "pages/404.html",
        },
        safe_directories={"/assets": True},
    ))

    @app.route("/")
    def index(request, response):
        return "Welcome"

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "FileRef",
    "FunctionRoute",
    "HANDLED",
    "HandledByCaller",
    "RenderedBody",
    "Request",
    "Response",
    "ResponseSink",
    "TemplateRef",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "App":
        from wren.app import App

        return App

    if name == "AppConfig":
        from wren.config import AppConfig

        return AppConfig

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name == "Response":
        from wren.http.response import Response

        return Response

    if name == "ResponseSink":
        from wren.server.sender import ResponseSink

        return ResponseSink

    if name in ("FileRef", "TemplateRef", "FunctionRoute"):
        from wren.routing import route as _route

        return getattr(_route, name)

    if name in ("HANDLED", "HandledByCaller", "RenderedBody"):
        from wren.server import output as _output

        return getattr(_output, name)

    if name in ("ConfigurationError", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

"""Route values — what a route produces.

A route value is one of three frozen dataclasses, fixed when the route
table is built:

- ``FileRef``      — serve a file from disk with an inferred content type
- ``TemplateRef``  — render a kida template file with a data mapping
- ``FunctionRoute`` — call a handler that returns a body or writes the
  response itself

Configuration may use the shorthand shapes accepted by
``to_route_value()``; the dispatcher only ever sees the tagged values.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Any

from wren.errors import ConfigurationError


class OutputKind(Enum):
    """How a route's content is produced."""

    FILE = "file"
    TEMPLATE = "template"
    FUNCTION = "function"


@dataclass(frozen=True, slots=True)
class FileRef:
    """A file served as-is. ``data`` is carried but not used for rendering."""

    path: str
    data: Mapping[str, Any] | None = None

    @property
    def extension(self) -> str:
        return PurePosixPath(self.path).suffix


@dataclass(frozen=True, slots=True)
class TemplateRef:
    """A template file rendered with ``data``."""

    path: str
    data: Mapping[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class FunctionRoute:
    """A handler called as ``handler(request, response)``.

    The handler returns the body as a string (or ``RenderedBody``), or
    writes through the response sink itself and returns ``None`` (or
    ``HANDLED``). It may be sync or async.
    """

    handler: Callable[..., Any]

    @property
    def name(self) -> str:
        return getattr(self.handler, "__qualname__", repr(self.handler))


type RouteValue = FileRef | TemplateRef | FunctionRoute


def output_kind(value: RouteValue) -> OutputKind:
    """Report the kind of a tagged route value."""
    match value:
        case FileRef():
            return OutputKind.FILE
        case TemplateRef():
            return OutputKind.TEMPLATE
        case FunctionRoute():
            return OutputKind.FUNCTION
    msg = f"Not a route value: {value!r}"
    raise TypeError(msg)


def _file_or_template(
    path: Any,
    data: Any,
    template_extension: str,
) -> FileRef | TemplateRef:
    if not isinstance(path, str | PurePosixPath) or not str(path):
        msg = f"Route file path must be a non-empty string, got {path!r}"
        raise ConfigurationError(msg)
    if data is not None and not isinstance(data, Mapping):
        msg = f"Route data for {str(path)!r} must be a mapping, got {type(data).__name__}"
        raise ConfigurationError(msg)
    path = str(path)
    if PurePosixPath(path).suffix == template_extension:
        return TemplateRef(path, data)
    return FileRef(path, data)


def to_route_value(raw: Any, template_extension: str = ".tpl") -> RouteValue:
    """Convert a configured route into a tagged route value.

    Accepted shapes::

        "pages/about.html"                          -> FileRef
        "pages/hello.tpl"                           -> TemplateRef
        ("pages/hello.tpl", {"name": "World"})      -> TemplateRef with data
        {"filename": "pages/hello.tpl", "data": {}} -> TemplateRef with data
        lambda request, response: "Hi"              -> FunctionRoute

    Pairs and mappings inherit FILE or TEMPLATE from the embedded path.
    Values that are already tagged are returned unchanged.

    Raises:
        ConfigurationError: If *raw* has none of these shapes.
    """
    match raw:
        case FileRef() | TemplateRef() | FunctionRoute():
            return raw
        case str():
            return _file_or_template(raw, None, template_extension)
        case (path, data):
            return _file_or_template(path, data, template_extension)
        case {"filename": path, **rest}:
            return _file_or_template(path, rest.get("data"), template_extension)
        case _ if callable(raw):
            return FunctionRoute(raw)
    msg = (
        f"Cannot use {type(raw).__name__} as a route. "
        f"Use a file path, a (path, data) pair, a {{'filename', 'data'}} mapping, "
        f"or a callable."
    )
    raise ConfigurationError(msg)

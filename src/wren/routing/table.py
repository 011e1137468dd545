"""Route table — canonical path or status code to route value.

Built once from ``DEFAULT_ROUTES`` merged with the configured routes, then
read-only for the life of the app.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from wren.errors import ConfigurationError
from wren.routing.paths import normalize
from wren.routing.route import FunctionRoute, RouteValue, to_route_value

logger = logging.getLogger("wren.routing")

# Status pages a configuration may define alongside paths.
RESERVED_STATUSES: frozenset[int] = frozenset({403, 404, 500})

type RouteKey = str | int

_WELCOME_PAGE = """\
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Wren</title></head>
<body><h1>It works!</h1><p>Add routes to your configuration to replace this page.</p></body>
</html>
"""


def _welcome(request: Any, response: Any) -> str:
    return _WELCOME_PAGE


def _forbidden(request: Any, response: Any) -> str:
    return "Forbidden"


def _not_found(request: Any, response: Any) -> str:
    return "Not Found"


def _server_error(request: Any, response: Any) -> str:
    return "Internal Server Error"


DEFAULT_ROUTES: Mapping[RouteKey, RouteValue] = MappingProxyType(
    {
        "/": FunctionRoute(_welcome),
        403: FunctionRoute(_forbidden),
        404: FunctionRoute(_not_found),
        500: FunctionRoute(_server_error),
    }
)


def route_key(key: Any) -> RouteKey:
    """Canonicalize a configured route key.

    Paths are normalized like request paths (``"/about"`` and
    ``"/about/"`` are the same route). Status keys may be given as ints
    or digit strings (JSON object keys are always strings).

    Raises:
        ConfigurationError: For non-reserved status codes or other types.
    """
    if isinstance(key, str) and key.isdigit():
        key = int(key)
    if isinstance(key, bool):
        msg = f"Invalid route key {key!r}"
        raise ConfigurationError(msg)
    if isinstance(key, int):
        if key not in RESERVED_STATUSES:
            allowed = ", ".join(str(s) for s in sorted(RESERVED_STATUSES))
            msg = f"Route key {key} is not a reserved status page ({allowed})"
            raise ConfigurationError(msg)
        return key
    if isinstance(key, str) and key.startswith("/"):
        return normalize(key)
    msg = f"Route key must be a path starting with '/' or a status code, got {key!r}"
    raise ConfigurationError(msg)


class RouteTable(Mapping[RouteKey, RouteValue]):
    """Immutable mapping of route keys to tagged route values.

    Usage::

        table = RouteTable.build({"/": "index.html", 404: "404.html"})
        table.lookup("/")                 # FileRef("index.html")
        table.resolve_with_fallback(403)  # no 403 entry -> the 404 route
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Mapping[RouteKey, RouteValue]) -> None:
        if "/" not in routes:
            msg = "The route table must define the root route '/'"
            raise ConfigurationError(msg)
        object.__setattr__(self, "_routes", MappingProxyType(dict(routes)))

    @classmethod
    def build(
        cls,
        overrides: Mapping[Any, Any] | None = None,
        *,
        template_extension: str = ".tpl",
    ) -> RouteTable:
        """Merge *overrides* over the default routes and tag every value.

        Later entries win when two keys canonicalize to the same route.
        """
        routes: dict[RouteKey, RouteValue] = dict(DEFAULT_ROUTES)
        for raw_key, raw_value in (overrides or {}).items():
            key = route_key(raw_key)
            routes[key] = to_route_value(raw_value, template_extension)
        logger.debug("Built route table with %d routes", len(routes))
        return cls(routes)

    def __getitem__(self, key: RouteKey) -> RouteValue:
        return self._routes[key]

    def __iter__(self) -> Iterator[RouteKey]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteTable({len(self._routes)} routes)"

    def lookup(self, key: RouteKey) -> RouteValue | None:
        """Return the route at *key*, or ``None``."""
        return self._routes.get(key)

    def resolve_with_fallback(self, key: RouteKey) -> RouteValue:
        """Return the route at *key*, else the ``404`` route, else ``/``.

        Never fails: the root route is always present.
        """
        route = self._routes.get(key)
        if route is None:
            route = self._routes.get(404)
        if route is None:
            route = self._routes["/"]
        return route

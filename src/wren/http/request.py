"""Immutable HTTP request.

Built once per request by the ASGI handler and passed to function routes.
The canonical routing key is computed here, so every later stage sees the
same normalized path.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field

from wren._internal.asgi import Receive, Scope
from wren.http.headers import Headers
from wren.http.query import QueryParams
from wren.routing.paths import normalize


@dataclass(frozen=True, slots=True)
class Request:
    """What a function route knows about the request.

    ``path`` is the path as received; ``canonical_path`` is the route
    table key derived from it. The method is recorded but never used for
    routing.
    """

    method: str
    path: str
    canonical_path: str
    headers: Headers
    query: QueryParams
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None

    _receive: Receive
    # Holds the body once read; the dict itself is mutable.
    _cache: dict[str, bytes] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Build a Request from an ASGI ``http`` scope."""
        path = scope.get("path") or "/"
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope.get("method", "GET"),
            path=path,
            canonical_path=normalize(path),
            headers=Headers(scope.get("headers", ())),
            query=QueryParams(scope.get("query_string", b"")),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
            _receive=receive,
        )

    @property
    def url(self) -> str:
        """``path`` with the query string appended, if there is one."""
        query = self.query.raw
        return f"{self.path}?{query}" if query else self.path

    async def stream(self) -> AsyncGenerator[bytes]:
        """Yield body chunks as the server delivers them."""
        more = True
        while more:
            message = await self._receive()
            if chunk := message.get("body", b""):
                yield chunk
            more = message.get("more_body", False)

    async def body(self) -> bytes:
        """The whole body. Read from the server once, then cached."""
        if "body" not in self._cache:
            self._cache["body"] = b"".join([chunk async for chunk in self.stream()])
        return self._cache["body"]

    async def text(self) -> str:
        """The body decoded as UTF-8."""
        return (await self.body()).decode("utf-8")

"""ASGI response sending — commits exactly one Response per request.

A ``ResponseSink`` wraps the ASGI ``send`` callable. The output resolver
writes through it, and function routes receive it as their second
argument so they can write the response themselves.
"""

import logging
from collections.abc import Mapping

from wren._internal.asgi import Send
from wren.errors import ResponseAlreadySent
from wren.http.response import Response

logger = logging.getLogger("wren.server")


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


class ResponseSink:
    """The single outbound response of one request.

    Usage::

        await sink.send(200, {"Content-Type": "text/plain"}, "hello")

    A sink commits once. A second ``send``/``commit`` raises
    ``ResponseAlreadySent`` instead of writing a second response.
    """

    __slots__ = ("_asgi_send", "_response")

    def __init__(self, send: Send) -> None:
        self._asgi_send = send
        self._response: Response | None = None

    @property
    def committed(self) -> bool:
        """Whether a response has been written."""
        return self._response is not None

    @property
    def response(self) -> Response | None:
        """The committed response, if any."""
        return self._response

    async def send(
        self,
        code: int = 200,
        headers: Mapping[str, str] | None = None,
        content: str | bytes | None = None,
    ) -> None:
        """Write status, headers, and optional content, then close."""
        await self.commit(Response(status=code, headers=tuple((headers or {}).items()), body=content))

    async def commit(self, response: Response) -> None:
        """Translate a Response into ASGI send() calls."""
        if self._response is not None:
            msg = (
                f"A {self._response.status} response was already sent; "
                f"refusing to send {response.status}"
            )
            raise ResponseAlreadySent(msg)

        # Not committed until headers and body have encoded.
        raw_headers: list[tuple[bytes, bytes]] = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in response.headers
        ]
        body = response.body_bytes if _body_allowed(response.status) else b""
        raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))
        self._response = response

        await self._asgi_send(
            {
                "type": "http.response.start",
                "status": response.status,
                "headers": raw_headers,
            }
        )
        await self._asgi_send(
            {
                "type": "http.response.body",
                "body": body,
            }
        )

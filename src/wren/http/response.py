"""The response a request commits.

A frozen status/headers/body triple. The ``ResponseSink`` turns one of
these into ASGI messages; ``TestClient`` hands one back to tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """Status, headers in the order given, and an optional body.

    ``with_*`` methods return a modified copy::

        Response(body="<h1>Gone</h1>").with_status(404).with_header("X-Id", "7")
    """

    status: int = 200
    headers: tuple[tuple[str, str], ...] = ()
    body: str | bytes | None = None

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        return self.with_headers({name: value})

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Copy with *headers* appended after the existing ones."""
        return replace(self, headers=self.headers + tuple(headers.items()))

    def with_body(self, body: str | bytes | None) -> Response:
        return replace(self, body=body)

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name*, compared case-insensitively."""
        wanted = name.lower()
        return next((v for k, v in self.headers if k.lower() == wanted), default)

    @property
    def content_type(self) -> str | None:
        return self.header("content-type")

    @property
    def body_bytes(self) -> bytes:
        """Body encoded as UTF-8 when it is text; ``b""`` when absent."""
        match self.body:
            case None:
                return b""
            case str():
                return self.body.encode("utf-8")
            case _:
                return self.body

    @property
    def text(self) -> str:
        return self.body_bytes.decode("utf-8")

"""Content types for served files, keyed by extension.

A small built-in table that configuration can extend or override.
Anything unmapped is served as ``text/html``.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

DEFAULT_CONTENT_TYPE = "text/html"

DEFAULT_CONTENT_TYPES: Mapping[str, str] = MappingProxyType(
    {
        ".css": "text/css",
        ".js": "text/javascript",
        ".txt": "text/plain",
        ".html": "text/html",
        ".htm": "text/html",
        ".json": "application/json",
        ".xml": "application/xml",
        ".svg": "image/svg+xml",
        ".png": "image/png",
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".gif": "image/gif",
        ".ico": "image/x-icon",
        ".woff2": "font/woff2",
    }
)


class ContentTypes(Mapping[str, str]):
    """Immutable extension -> MIME type table.

    Usage::

        types = ContentTypes({".md": "text/markdown"})
        types.resolve(".css")  # "text/css"
        types.resolve(".md")   # "text/markdown"
        types.resolve(".zzz")  # "text/html"
    """

    __slots__ = ("_table",)

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        table = dict(DEFAULT_CONTENT_TYPES)
        for extension, mime_type in (overrides or {}).items():
            table[extension.lower()] = mime_type
        object.__setattr__(self, "_table", MappingProxyType(table))

    def __getitem__(self, extension: str) -> str:
        return self._table[extension]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def resolve(self, extension: str | None) -> str:
        """MIME type for *extension* (with leading dot), ``text/html`` if unmapped."""
        if not extension:
            return DEFAULT_CONTENT_TYPE
        return self._table.get(extension.lower(), DEFAULT_CONTENT_TYPE)

"""Wren exception hierarchy.

Shared across the route table, loader, output resolver, and sink so every
module raises and catches the same types.
"""

from pathlib import Path


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when app configuration or a route value is invalid.

    Typically raised while the route table is built, during
    ``App._freeze()`` at startup.
    """


class LoadError(WrenError):
    """A file backing a route could not be loaded."""

    def __init__(self, path: str | Path, detail: str = "") -> None:
        self.path = str(path)
        self.detail = detail
        super().__init__(f"{self.path}: {detail}" if detail else self.path)


class FileNotFound(LoadError):  # noqa: N818
    """The file does not exist. Rendered with the ``404`` route."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "no such file")


class FileReadError(LoadError):
    """The file exists but reading it failed. Rendered with the ``500`` route."""

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(path, f"read failed ({type(cause).__name__}: {cause})")


class ResponseAlreadySent(WrenError):  # noqa: N818
    """A response sink was asked to commit a second response."""

"""Request path normalization and location classification.

Both rules are purely syntactic: nothing here touches the filesystem.
A path whose final segment contains a ``.`` names a file; any other path
names a directory and is canonicalized with a trailing slash.
"""

from collections.abc import Collection
from enum import Enum
from pathlib import Path


class Location(Enum):
    """What a canonical path denotes."""

    FILE = "file"
    DIRECTORY = "directory"


def _final_segment(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def split_target(raw: str) -> tuple[str, str]:
    """Split a raw request target into ``(path, query)``.

    Examples::

        "/docs?page=2" -> ("/docs", "page=2")
        ""             -> ("/", "")
    """
    path, _, query = raw.partition("?")
    return path or "/", query


def normalize(raw: str) -> str:
    """Return the canonical routing key for a raw request path.

    The query string is discarded. Directory-like paths gain a trailing
    slash; file-like paths are returned unchanged::

        "/about"          -> "/about/"
        "/about/"         -> "/about/"
        "/assets/app.js"  -> "/assets/app.js"
        "/search?q=wren"  -> "/search/"
    """
    path, _ = split_target(raw)
    if "." in _final_segment(path):
        return path
    if not path.endswith("/"):
        path += "/"
    return path


def classify(path: str) -> Location:
    """Classify a canonical path as a file or a directory."""
    if "." in _final_segment(path):
        return Location.FILE
    return Location.DIRECTORY


def containing_directory(path: str) -> str:
    """Strip the final segment of *path*.

    Used only for safe-directory lookups::

        "/public/css/site.css" -> "/public/css"
        "/robots.txt"          -> ""
    """
    return "/".join(path.split("/")[:-1])


def is_authorized(path: str, safe_directories: Collection[str] | None) -> bool:
    """Whether fallback file serving may read *path*.

    With no safe-directory set every path is allowed. Otherwise the
    file's containing directory must be a member of the set.
    """
    if safe_directories is None:
        return True
    return containing_directory(path) in safe_directories


def static_path(path: str, root: str | Path = ".") -> str:
    """Filesystem path for serving canonical *path* relative to *root*.

    ``static_path("/assets/app.js")`` is ``"./assets/app.js"``.
    """
    return str(root).rstrip("/") + path

"""Async file loading — check existence, then read.

The check and the read are separate filesystem calls, so a file removed
in between surfaces as a read error rather than a missing file. This
race is accepted; neither step is retried.
"""

from pathlib import Path

import anyio

from wren.errors import FileNotFound, FileReadError


async def load_file(path: str | Path) -> bytes:
    """Return the contents of *path*.

    Raises:
        FileNotFound: If *path* does not exist.
        FileReadError: If *path* exists but cannot be read (permissions,
            I/O faults, a directory, or removal after the existence check).
    """
    target = anyio.Path(path)
    if not await target.exists():
        raise FileNotFound(path)
    try:
        return await target.read_bytes()
    except OSError as exc:
        raise FileReadError(path, exc) from exc

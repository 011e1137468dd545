"""Tests for wren.server.loader — async existence check then read."""

import pytest

from wren.errors import FileNotFound, FileReadError, LoadError
from wren.server.loader import load_file


class TestLoadFile:
    async def test_reads_bytes(self, tmp_path) -> None:
        target = tmp_path / "app.js"
        target.write_bytes(b"console.log('hi');")
        assert await load_file(target) == b"console.log('hi');"

    async def test_accepts_str_path(self, tmp_path) -> None:
        target = tmp_path / "a.txt"
        target.write_text("text")
        assert await load_file(str(target)) == b"text"

    async def test_missing_file(self, tmp_path) -> None:
        missing = tmp_path / "missing.html"
        with pytest.raises(FileNotFound) as exc_info:
            await load_file(missing)
        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value, LoadError)

    async def test_unreadable_path_is_read_error(self, tmp_path) -> None:
        # A directory exists but cannot be read as a file.
        directory = tmp_path / "dir.css"
        directory.mkdir()
        with pytest.raises(FileReadError) as exc_info:
            await load_file(directory)
        assert isinstance(exc_info.value.cause, OSError)

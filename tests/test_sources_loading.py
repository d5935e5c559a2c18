"""Tests for LocalFileSystem.

Python 3.13+.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from langjs.sources import LocalFileSystem


class TestLocalFileSystem:
    """Disk access and atomic writes."""

    def test_queries(self, tmp_path: Path) -> None:
        """is_dir, is_file and list_dir reflect the disk."""
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "messages.json").write_text("{}", encoding="utf-8")
        fs = LocalFileSystem()

        assert fs.is_dir(tmp_path / "en")
        assert not fs.is_file(tmp_path / "en")
        assert fs.is_file(tmp_path / "en" / "messages.json")
        assert fs.list_dir(tmp_path / "en") == ["messages.json"]
        assert not fs.is_dir(tmp_path / "missing")

    def test_read_text_utf8(self, tmp_path: Path) -> None:
        """Files are read as UTF-8."""
        path = tmp_path / "lv.json"
        path.write_bytes('{"home": "Mājas"}'.encode())

        assert LocalFileSystem().read_text(path) == '{"home": "Mājas"}'

    def test_read_invalid_utf8(self, tmp_path: Path) -> None:
        """Invalid bytes raise UnicodeDecodeError."""
        path = tmp_path / "bad.json"
        path.write_bytes(b"\xff\xfe")

        with pytest.raises(UnicodeDecodeError):
            LocalFileSystem().read_text(path)

    def test_write_creates_file(self, tmp_path: Path) -> None:
        """A new file is written with exact content and no temp leftovers."""
        target = tmp_path / "out.js"

        LocalFileSystem().write_text(target, "a\r\nb\n")

        assert target.read_bytes() == b"a\r\nb\n"
        assert os.listdir(tmp_path) == ["out.js"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_new_file_mode(self, tmp_path: Path) -> None:
        """New outputs are world readable."""
        target = tmp_path / "out.js"

        LocalFileSystem().write_text(target, "x")

        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_existing_mode_kept(self, tmp_path: Path) -> None:
        """Replacing a file keeps its permissions."""
        target = tmp_path / "out.js"
        target.write_text("old", encoding="utf-8")
        target.chmod(0o640)

        LocalFileSystem().write_text(target, "new")

        assert target.read_text(encoding="utf-8") == "new"
        assert stat.S_IMODE(target.stat().st_mode) == 0o640

    def test_missing_parent(self, tmp_path: Path) -> None:
        """Parent directories are not created."""
        with pytest.raises(OSError):
            LocalFileSystem().write_text(tmp_path / "missing" / "out.js", "x")

        assert not (tmp_path / "missing").exists()

    def test_failed_replace_keeps_previous(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A failure before the rename leaves the old file and no temp file."""
        target = tmp_path / "out.js"
        target.write_text("previous", encoding="utf-8")

        def fail(*_args: object) -> None:
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", fail)

        with pytest.raises(OSError, match="disk full"):
            LocalFileSystem().write_text(target, "new")

        assert target.read_text(encoding="utf-8") == "previous"
        assert os.listdir(tmp_path) == ["out.js"]

"""File access infrastructure for the generator.

Provides the protocol through which the scanner, merger and generator
touch the disk, and the local filesystem implementation used by default.
Tests and embedding applications can supply any object with the same
methods.

Components:
    FileSystem - Protocol for directory listing, reading and writing (structural typing)
    LocalFileSystem - Disk-based implementation with atomic writes

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

__all__ = [
    "FileSystem",
    "LocalFileSystem",
]

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Protocol for the file access the generator needs.

    This is a Protocol (structural typing) rather than ABC so that an
    in-memory double or a framework's own filesystem abstraction can be
    passed without inheriting from langjs.

    Example:
        >>> fs = LocalFileSystem()
        >>> fs.is_dir(Path("resources/lang"))
        True
        >>> fs.list_dir(Path("resources/lang"))
        ['en', 'es']
    """

    def is_dir(self, path: Path) -> bool:
        """Return True if path exists and is a directory."""

    def is_file(self, path: Path) -> bool:
        """Return True if path exists and is a regular file."""

    def list_dir(self, path: Path) -> list[str]:
        """Return entry names of a directory, in any order.

        Raises:
            OSError: If the directory cannot be listed
        """

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the content is not valid UTF-8
        """

    def write_text(self, path: Path, text: str) -> None:
        """Write a UTF-8 text file, replacing any existing file.

        Raises:
            OSError: If the file cannot be written
        """


@dataclass(frozen=True, slots=True)
class LocalFileSystem:
    """FileSystem implementation backed by the local disk.

    Writes go to a temporary sibling file which then replaces the target,
    so readers never observe a half-written output and a failed write
    leaves any previous file untouched. Parent directories are not created.
    """

    encoding: str = "utf-8"

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def is_file(self, path: Path) -> bool:
        return Path(path).is_file()

    def list_dir(self, path: Path) -> list[str]:
        return [entry.name for entry in Path(path).iterdir()]

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding=self.encoding)

    def write_text(self, path: Path, text: str) -> None:
        target = Path(path)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as handle:
                handle.write(text)
            # mkstemp creates 0600; generated assets are meant to be served
            mode = target.stat().st_mode & 0o777 if target.exists() else 0o644
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d characters to %s", len(text), target)

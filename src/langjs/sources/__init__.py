"""Source tree discovery: file access, resource descriptors and the scanner.

Python 3.13+.
"""

from .loading import FileSystem, LocalFileSystem
from .scanner import SourceTreeScanner, classify, scan_source_tree
from .types import GroupId, LocaleCode, MessageKey, Messages, ResourceFile

__all__ = [
    "FileSystem",
    "GroupId",
    "LocalFileSystem",
    "LocaleCode",
    "MessageKey",
    "Messages",
    "ResourceFile",
    "SourceTreeScanner",
    "classify",
    "scan_source_tree",
]

"""Source tree scanner.

Walks a language root laid out as

    <root>/<locale>/<dir>/.../<group>.<ext>
    <root>/<locale>/vendor/<namespace>/<dir>/.../<group>.<ext>
    <root>/vendor/<namespace>/<locale>/<dir>/.../<group>.<ext>

and yields one ResourceFile per recognized translation file. Directory
listings are sorted so the scan order, and everything derived from it,
is identical between runs on an unchanged tree.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path, PurePosixPath

from langjs.constants import GROUP_PATH_SEPARATOR, RESOURCE_EXTENSIONS, VENDOR_DIRECTORY
from langjs.diagnostics import ErrorTemplate, SourceNotFoundError, SourceReadError
from langjs.locale_utils import is_known_locale
from langjs.sources.loading import FileSystem, LocalFileSystem
from langjs.sources.types import ResourceFile

__all__ = [
    "SourceTreeScanner",
    "classify",
    "scan_source_tree",
]

logger = logging.getLogger(__name__)


def classify(relative_path: str) -> ResourceFile | None:
    """Map a root-relative POSIX path to a ResourceFile.

    Returns None for paths that do not follow the layout convention or do
    not carry a recognized extension. Those are simply not resources.

    Example:
        >>> classify("en/forum/thread.json").identity
        'forum/thread'
        >>> classify("en/vendor/acme/messages.json").key_prefix
        'en.acme::messages'
        >>> classify("README.md") is None
        True
    """
    path = PurePosixPath(relative_path)
    extension = path.suffix.lower()
    if extension not in RESOURCE_EXTENSIONS or not path.stem:
        return None

    *directories, _ = path.parts
    group_leaf = path.stem

    # Files directly under the root have no locale
    if not directories:
        return None

    namespace: str | None = None
    match directories:
        case [str() as vendor, namespace_dir, locale, *group_dirs] if vendor == VENDOR_DIRECTORY:
            namespace = namespace_dir
        case [locale, str() as vendor, namespace_dir, *group_dirs] if vendor == VENDOR_DIRECTORY:
            namespace = namespace_dir
        case [str() as vendor] | [str() as vendor, _] if vendor == VENDOR_DIRECTORY:
            # vendor/<file> and vendor/<namespace>/<file> name no locale
            return None
        case [locale, *group_dirs]:
            pass

    group = GROUP_PATH_SEPARATOR.join([*group_dirs, group_leaf])
    return ResourceFile(
        locale=locale,
        namespace=namespace,
        group=group,
        relative_path=relative_path,
        extension=extension,
    )


class SourceTreeScanner:
    """Discover translation resources under a language root.

    The scanner only reads directory listings; file contents are left to
    the merger.

    Args:
        filesystem: File access capability
        root: Directory to scan
        validate_locales: Log a warning for locale directories Babel
            does not recognize (they are still scanned)
    """

    def __init__(
        self,
        filesystem: FileSystem,
        root: str | Path,
        *,
        validate_locales: bool = False,
    ) -> None:
        self._filesystem = filesystem
        self._root = Path(root)
        self._validate_locales = validate_locales

    @property
    def root(self) -> Path:
        """Directory being scanned."""
        return self._root

    def scan(self) -> Iterator[ResourceFile]:
        """Yield resources in deterministic (sorted traversal) order.

        Directory links pointing back at a directory being walked are
        skipped with a warning.

        Raises:
            SourceNotFoundError: If the root does not exist or is not a directory
            SourceReadError: If a directory under the root cannot be listed
        """
        if not self._filesystem.is_dir(self._root):
            raise SourceNotFoundError(ErrorTemplate.source_not_found(str(self._root)))

        warned: set[str] = set()
        walk = self._walk(self._root, PurePosixPath(), frozenset({self._root.resolve()}))
        for relative_path in walk:
            resource = classify(relative_path)
            if resource is None:
                logger.debug("Skipping non-resource file: %s", relative_path)
                continue
            if self._validate_locales and resource.locale not in warned:
                warned.add(resource.locale)
                if not is_known_locale(resource.locale):
                    diagnostic = ErrorTemplate.unknown_locale(resource.locale, str(self._root))
                    logger.warning("%s", diagnostic.format_error())
            logger.debug(
                "Discovered resource %s (locale=%s, group=%s)",
                relative_path,
                resource.locale,
                resource.identity,
            )
            yield resource

    def _walk(
        self, directory: Path, relative: PurePosixPath, ancestors: frozenset[Path]
    ) -> Iterator[str]:
        try:
            names = sorted(self._filesystem.list_dir(directory))
        except OSError as e:
            raise SourceReadError(
                ErrorTemplate.source_unreadable(str(directory), str(e))
            ) from e

        for name in names:
            if name.startswith("."):
                continue
            path = directory / name
            if self._filesystem.is_dir(path):
                resolved = path.resolve()
                if resolved in ancestors:
                    logger.warning(
                        "Skipping directory %s: it links back to %s", relative / name, resolved
                    )
                    continue
                yield from self._walk(path, relative / name, ancestors | {resolved})
            elif self._filesystem.is_file(path):
                yield str(relative / name)


def scan_source_tree(
    root: str | Path,
    filesystem: FileSystem | None = None,
    *,
    validate_locales: bool = False,
) -> list[ResourceFile]:
    """Scan a language root and materialize the discovered resources.

    Args:
        root: Directory to scan
        filesystem: File access capability (default: LocalFileSystem)
        validate_locales: Warn about locale names unknown to Babel

    Returns:
        Resources in scan order

    Raises:
        SourceNotFoundError: If the root does not exist or is not a directory
    """
    scanner = SourceTreeScanner(
        filesystem if filesystem is not None else LocalFileSystem(),
        root,
        validate_locales=validate_locales,
    )
    return list(scanner.scan())

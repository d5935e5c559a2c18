"""Message merger.

Reads each discovered resource, decodes it, and flattens every nested
mapping into one aggregate of canonical dotted keys:

    locale.[namespace::]group.path.nested.key -> message

An optional group filter restricts which resources are merged. Files are
merged in scan order and keys in source order; a key produced twice keeps
the value written last. The aggregate is then sorted by key unless the
caller asks for scan order.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

from langjs.constants import (
    GROUP_PATH_SEPARATOR,
    KEY_SEPARATOR,
    MAX_NESTING_DEPTH,
    RESOURCE_EXTENSIONS,
)
from langjs.diagnostics import ErrorTemplate, ResourceParseError
from langjs.merging.decoders import decode_resource
from langjs.sources.loading import FileSystem, LocalFileSystem
from langjs.sources.types import GroupId, Messages, ResourceFile

__all__ = [
    "MessageMerger",
    "flatten",
    "merge_messages",
    "normalize_group_filter",
]

logger = logging.getLogger(__name__)


def normalize_group_filter(groups: Iterable[str] | None) -> tuple[GroupId, ...] | None:
    """Normalize group filter entries.

    Strips whitespace, converts backslashes to '/', drops a trailing
    recognized extension and removes duplicates while keeping order.
    None or an empty iterable means "include all" and yields None.

    Example:
        >>> normalize_group_filter(["messages", " forum\\\\thread.json ", "messages"])
        ('messages', 'forum/thread')
        >>> normalize_group_filter([]) is None
        True
    """
    if groups is None:
        return None
    normalized: dict[GroupId, None] = {}
    for entry in groups:
        group = entry.strip().replace("\\", GROUP_PATH_SEPARATOR)
        suffix = Path(group).suffix.lower()
        if suffix in RESOURCE_EXTENSIONS:
            group = group[: -len(suffix)]
        if group:
            normalized[group] = None
    return tuple(normalized) or None


def _scalar_text(value: object) -> str | None:
    """Render a non-string leaf as the text the client would display."""
    if isinstance(value, bool | int | float):
        return json.dumps(value)
    return None


def flatten(
    data: Mapping[Any, Any] | Sequence[Any],
    prefix: str,
    *,
    path: str = "",
    max_depth: int = MAX_NESTING_DEPTH,
) -> Iterator[tuple[str, str]]:
    """Walk nested mappings and lists, yielding (dotted_key, message) pairs.

    Mapping keys are joined with '.', list items contribute their index.
    Strings are yielded as is; numbers and booleans as their JSON text;
    None leaves are dropped.

    Args:
        data: Decoded resource content (or a nested part of it)
        prefix: Dotted key of ``data`` itself
        path: Resource path for error reporting
        max_depth: Maximum nesting below ``prefix``

    Raises:
        ResourceParseError: If nesting exceeds max_depth or a leaf has an
            unsupported type

    Example:
        >>> list(flatten({"a": {"b": "x"}, "c": ["y", "z"]}, "en.messages"))
        [('en.messages.a.b', 'x'), ('en.messages.c.0', 'y'), ('en.messages.c.1', 'z')]
    """
    # Explicit stack keeps deep resources off the interpreter call stack
    stack: list[tuple[str, Any, int]] = [(prefix, data, 0)]
    while stack:
        key, value, depth = stack.pop()
        if isinstance(value, str):
            yield key, value
            continue
        if value is None:
            logger.debug("Dropping null message '%s' in %s", key, path)
            continue
        if isinstance(value, Mapping):
            children = [(str(k), v) for k, v in value.items()]
        elif isinstance(value, list | tuple):
            children = [(str(i), v) for i, v in enumerate(value)]
        else:
            text = _scalar_text(value)
            if text is None:
                raise ResourceParseError(
                    ErrorTemplate.invalid_value_type(path, key, type(value).__name__),
                    path=path,
                )
            yield key, text
            continue
        if depth >= max_depth and children:
            raise ResourceParseError(
                ErrorTemplate.nesting_depth_exceeded(path, key, max_depth), path=path
            )
        # Reversed so that pops come out in source order
        for child_key, child in reversed(children):
            stack.append((f"{key}{KEY_SEPARATOR}{child_key}", child, depth + 1))


class MessageMerger:
    """Merge discovered resources into one dotted-key mapping.

    Args:
        filesystem: File access capability
        root: Scan root the resources' relative paths are based on
        group_filter: Group identities to include (None includes everything)
        sort: Sort the aggregate by key (default True); False keeps scan order
    """

    def __init__(
        self,
        filesystem: FileSystem,
        root: str | Path,
        group_filter: Iterable[str] | None = None,
        *,
        sort: bool = True,
    ) -> None:
        self._filesystem = filesystem
        self._root = Path(root)
        self._group_filter = normalize_group_filter(group_filter)
        self._sort = sort

    @property
    def group_filter(self) -> tuple[GroupId, ...] | None:
        """Normalized filter, or None when every group is included."""
        return self._group_filter

    def includes(self, resource: ResourceFile) -> bool:
        """Return True if the resource passes the group filter."""
        return self._group_filter is None or resource.identity in self._group_filter

    def merge(self, resources: Iterable[ResourceFile]) -> Messages:
        """Merge resources into the aggregate mapping.

        Args:
            resources: Resources in scan order

        Returns:
            Dotted key -> message mapping

        Raises:
            ResourceParseError: If any included resource cannot be read or decoded
        """
        messages: Messages = {}
        for resource in resources:
            if not self.includes(resource):
                logger.debug("Excluded by group filter: %s", resource.relative_path)
                continue
            for key, value in flatten(
                self._load(resource), resource.key_prefix, path=resource.relative_path
            ):
                if key in messages and messages[key] != value:
                    logger.debug(
                        "Message '%s' overwritten by %s", key, resource.relative_path
                    )
                messages[key] = value

        if self._sort:
            return dict(sorted(messages.items()))
        return messages

    def _load(self, resource: ResourceFile) -> Mapping[str, Any]:
        full_path = self._root / resource.relative_path
        try:
            text = self._filesystem.read_text(full_path)
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceParseError(
                ErrorTemplate.resource_parse_failed(resource.relative_path, str(e)),
                path=resource.relative_path,
            ) from e
        # A leading byte order mark is not part of the content
        text = text.removeprefix("\ufeff")
        return decode_resource(text, resource.relative_path, resource.format)


def merge_messages(
    resources: Iterable[ResourceFile],
    root: str | Path,
    group_filter: Iterable[str] | None = None,
    *,
    filesystem: FileSystem | None = None,
    sort: bool = True,
) -> Messages:
    """Merge resources found under ``root`` (convenience wrapper).

    Raises:
        ResourceParseError: If any included resource cannot be read or decoded
    """
    merger = MessageMerger(
        filesystem if filesystem is not None else LocalFileSystem(),
        root,
        group_filter,
        sort=sort,
    )
    return merger.merge(resources)

"""Data model for discovered translation resources.

Provides semantic type aliases and the ResourceFile descriptor produced by
the source tree scanner and consumed by the message merger.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from langjs.constants import GROUP_PATH_SEPARATOR, KEY_SEPARATOR, NAMESPACE_SEPARATOR
from langjs.enums import ResourceFormat

__all__ = [
    "GroupId",
    "LocaleCode",
    "MessageKey",
    "Messages",
    "ResourceFile",
]

LocaleCode: TypeAlias = str
"""Locale directory name (e.g., 'en', 'pt_BR', 'zh-Hans')."""

GroupId: TypeAlias = str
"""Group identity used by filters (e.g., 'messages', 'forum/thread', 'acme::messages')."""

MessageKey: TypeAlias = str
"""Canonical dotted message key (e.g., 'en.acme::messages.welcome')."""

Messages: TypeAlias = dict[MessageKey, str]
"""Aggregate mapping of dotted keys to message strings, in emission order."""


@dataclass(frozen=True, slots=True)
class ResourceFile:
    """One physical translation resource discovered under the scan root.

    Attributes:
        locale: First path segment (or the locale directory of a vendor tree)
        namespace: Vendor namespace, None for application resources
        group: Group path joined with '/', without extension
        relative_path: POSIX path relative to the scan root
        extension: Lowercase file suffix including the dot
    """

    locale: LocaleCode
    namespace: str | None
    group: str
    relative_path: str
    extension: str

    @property
    def format(self) -> ResourceFormat:
        """Structured serialization of the file content."""
        return ResourceFormat.from_extension(self.extension)

    @property
    def identity(self) -> GroupId:
        """Group identity as written in group filters."""
        if self.namespace is None:
            return self.group
        return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.group}"

    @property
    def key_prefix(self) -> MessageKey:
        """Dotted prefix shared by every key flattened from this file."""
        group_key = self.group.replace(GROUP_PATH_SEPARATOR, KEY_SEPARATOR)
        if self.namespace is not None:
            group_key = f"{self.namespace}{NAMESPACE_SEPARATOR}{group_key}"
        return f"{self.locale}{KEY_SEPARATOR}{group_key}"

"""Resource content decoders.

Each decoder turns the text of one resource file into a nested mapping of
message keys to values. Decoding failures are fatal for the whole run and
surface as ResourceParseError naming the file.

Formats:
    JSON - json.loads, top level must be an object
    YAML - PyYAML safe loader without YAML 1.1 boolean and timestamp
           resolution, empty document is an empty mapping
    PO   - babel.messages.pofile.read_po, translated entries only

Python 3.13+.
"""

from __future__ import annotations

import io
import json
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

import yaml
from babel.messages.pofile import PoFileError, read_po

from langjs.constants import KEY_SEPARATOR, PLURAL_SEPARATOR
from langjs.diagnostics import ErrorTemplate, ResourceParseError
from langjs.enums import ResourceFormat

__all__ = [
    "decode_json",
    "decode_po",
    "decode_resource",
    "decode_yaml",
]

Decoder: TypeAlias = Callable[[str, str], Mapping[str, Any]]

# yes/no/on/off and dates stay text; they are message keys and values
_TEXT_TAGS = frozenset({"tag:yaml.org,2002:bool", "tag:yaml.org,2002:timestamp"})


class _MessageLoader(yaml.SafeLoader):
    """SafeLoader that leaves boolean-like and date-like scalars as strings."""


_MessageLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _require_mapping(value: object, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ResourceParseError(
            ErrorTemplate.resource_not_mapping(path, type(value).__name__), path=path
        )
    return value


def decode_json(text: str, path: str) -> Mapping[str, Any]:
    """Decode a JSON resource.

    Args:
        text: File content
        path: Resource path for error reporting

    Raises:
        ResourceParseError: If the content is not valid JSON or not an object
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        reason = f"{e.msg} (line {e.lineno}, column {e.colno})"
        raise ResourceParseError(
            ErrorTemplate.resource_parse_failed(path, reason), path=path
        ) from e
    return _require_mapping(data, path)


def decode_yaml(text: str, path: str) -> Mapping[str, Any]:
    """Decode a YAML resource with the safe loader.

    Plain scalars such as `yes`, `off` or `2024-01-01` are kept as text
    instead of becoming booleans or dates.

    Raises:
        ResourceParseError: If the content is not valid YAML or not a mapping
    """
    try:
        data = yaml.load(text, Loader=_MessageLoader)  # noqa: S506 - SafeLoader subclass
    except yaml.YAMLError as e:
        raise ResourceParseError(
            ErrorTemplate.resource_parse_failed(path, str(e).replace("\n", " ")), path=path
        ) from e
    if data is None:
        return {}
    return _require_mapping(data, path)


def decode_po(text: str, path: str) -> Mapping[str, Any]:
    """Decode a gettext catalog into a flat msgid -> msgstr mapping.

    Fuzzy, untranslated and obsolete entries are left out. Plural forms
    are joined with '|'. Entries with a msgctxt are keyed 'context.msgid'.

    Raises:
        ResourceParseError: If Babel rejects the catalog
    """
    try:
        catalog = read_po(io.StringIO(text), abort_invalid=True)
    except (PoFileError, ValueError) as e:
        raise ResourceParseError(
            ErrorTemplate.resource_parse_failed(path, str(e)), path=path
        ) from e

    messages: dict[str, str] = {}
    for message in catalog:
        if not message.id or message.fuzzy:
            continue
        msgid = message.id[0] if isinstance(message.id, (list, tuple)) else message.id
        if isinstance(message.string, (list, tuple)):
            if not any(message.string):
                continue
            value = PLURAL_SEPARATOR.join(message.string)
        else:
            if not message.string:
                continue
            value = message.string
        key = f"{message.context}{KEY_SEPARATOR}{msgid}" if message.context else msgid
        messages[key] = value
    return messages


_DECODERS: dict[ResourceFormat, Decoder] = {
    ResourceFormat.JSON: decode_json,
    ResourceFormat.YAML: decode_yaml,
    ResourceFormat.PO: decode_po,
}


def decode_resource(text: str, path: str, resource_format: ResourceFormat) -> Mapping[str, Any]:
    """Decode resource text with the decoder registered for its format.

    Args:
        text: File content
        path: Resource path for error reporting
        resource_format: Serialization of the content

    Returns:
        Nested mapping of keys to message values

    Raises:
        ResourceParseError: If decoding fails
    """
    return _DECODERS[resource_format](text, path)

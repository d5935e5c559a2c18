"""Configuration for the langjs command.

Settings live in the ``[tool.langjs]`` table of ``pyproject.toml`` (or any
TOML file passed with ``--config``). Command-line arguments override the
file, which overrides the built-in defaults.

    [tool.langjs]
    source_path = "resources/lang"
    output_path = "public/js/messages.js"
    messages = ["messages", "forum/thread", "acme::validation"]
    include_library = true
    sort = true
    validate_locales = false

Relative paths are resolved against the directory holding the TOML file.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from langjs.constants import CONFIG_TABLE, DEFAULT_OUTPUT_PATH, DEFAULT_SOURCE_PATH
from langjs.diagnostics import ConfigError, ErrorTemplate

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "LangJsConfig",
    "load_config",
]

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "pyproject.toml"


@dataclass(frozen=True, slots=True)
class LangJsConfig:
    """Immutable generator configuration.

    All fields have defaults; ``LangJsConfig()`` is a usable configuration.

    Attributes:
        source_path: Language directory to scan (default: resources/lang)
        output_path: Output file used when no target argument is given
        messages: Group identities to include; empty includes everything
        include_library: Embed the lang.js runtime library (default: True)
        sort: Sort messages by key (default: True)
        validate_locales: Warn about locale directories Babel does not know
    """

    source_path: str = DEFAULT_SOURCE_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    messages: tuple[str, ...] = ()
    include_library: bool = True
    sort: bool = True
    validate_locales: bool = False

    def __post_init__(self) -> None:
        """Validate field types at construction time.

        Raises:
            ValueError: If a path is empty or a field has the wrong type
        """
        for name in ("source_path", "output_path"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                msg = f"{name} must be a non-empty string, got {value!r}"
                raise ValueError(msg)
        if not isinstance(self.messages, tuple) or not all(
            isinstance(group, str) for group in self.messages
        ):
            msg = f"messages must be a list of strings, got {self.messages!r}"
            raise ValueError(msg)
        for name in ("include_library", "sort", "validate_locales"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be a boolean, got {value!r}"
                raise ValueError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, base_dir: Path | None = None) -> LangJsConfig:
        """Build a configuration from a ``[tool.langjs]`` table.

        Keys may be written with hyphens or underscores.

        Args:
            data: Table contents
            base_dir: Directory relative paths are resolved against

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for raw_key, value in data.items():
            key = raw_key.replace("-", "_")
            if key not in known:
                msg = f"unknown key '{raw_key}'"
                raise ValueError(msg)
            values[key] = value
        if isinstance(values.get("messages"), list):
            values["messages"] = tuple(values["messages"])
        config = cls(**values)
        if base_dir is None:
            return config
        return replace(
            config,
            source_path=str(base_dir / config.source_path),
            output_path=str(base_dir / config.output_path),
        )


def load_config(path: str | Path | None = None) -> LangJsConfig:
    """Load configuration from a TOML file.

    Args:
        path: TOML file to read. None reads ./pyproject.toml when present
            and falls back to defaults when it is not.

    Returns:
        Loaded (or default) configuration

    Raises:
        ConfigError: If an explicit file is missing, the TOML is malformed,
            or the [tool.langjs] table holds unknown keys or invalid values
    """
    explicit = path is not None
    config_path = Path(path) if explicit else Path(DEFAULT_CONFIG_FILE)

    if not config_path.is_file():
        if explicit:
            raise ConfigError(ErrorTemplate.config_invalid(str(config_path), "file not found"))
        logger.debug("No %s found, using default configuration", config_path)
        return LangJsConfig()

    try:
        with config_path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(ErrorTemplate.config_invalid(str(config_path), str(e))) from e

    table: Any = document
    for part in CONFIG_TABLE:
        table = table.get(part, {}) if isinstance(table, Mapping) else {}
    if not isinstance(table, Mapping):
        raise ConfigError(
            ErrorTemplate.config_invalid(str(config_path), "[tool.langjs] must be a table")
        )

    try:
        config = LangJsConfig.from_mapping(table, base_dir=config_path.parent)
    except (TypeError, ValueError) as e:
        raise ConfigError(ErrorTemplate.config_invalid(str(config_path), str(e))) from e

    logger.debug("Loaded configuration from %s: %s", config_path, config)
    return config

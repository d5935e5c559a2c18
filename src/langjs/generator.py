"""Generation pipeline: scan, merge, render, write.

LangJsGenerator receives its file access capability, scan root and group
filter as plain arguments; nothing is looked up from global configuration.
Every stage completes before the output is written, and the write itself
replaces the target atomically, so a failed run leaves no partial file.

Example:
    >>> from langjs import LangJsGenerator, LocalFileSystem
    >>> generator = LangJsGenerator(LocalFileSystem(), "resources/lang")
    >>> result = generator.generate("public/js/messages.js")
    >>> result.locales
    ('en', 'es')

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from langjs.diagnostics import ErrorTemplate, OutputWriteError
from langjs.merging import MessageMerger
from langjs.rendering import TemplateRenderer, serialize_messages
from langjs.sources import FileSystem, Messages, ResourceFile, SourceTreeScanner

__all__ = [
    "GenerateOptions",
    "GenerationResult",
    "LangJsGenerator",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerateOptions:
    """Per-run options.

    Attributes:
        source_path: Directory to scan instead of the generator's default
        include_library: Embed the lang.js runtime library
        json_only: Write only the messages JSON, without template or library
        sort: Sort messages by key; False keeps scan order
        messages_included: Group filter replacing the generator's own
    """

    source_path: str | Path | None = None
    include_library: bool = True
    json_only: bool = False
    sort: bool = True
    messages_included: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Summary of a completed run."""

    target: Path
    file_count: int
    message_count: int
    locales: tuple[str, ...]
    included_library: bool
    json_only: bool


@dataclass(frozen=True, slots=True)
class _Collected:
    resources: tuple[ResourceFile, ...]
    messages: Messages


class LangJsGenerator:
    """Convert a language directory into a client-side script.

    Args:
        filesystem: File access capability
        source_path: Default directory to scan
        messages_included: Default group filter (None includes everything)
        validate_locales: Warn about locale directories Babel does not know
        renderer: Template renderer (default: packaged template and lang.js)
    """

    def __init__(
        self,
        filesystem: FileSystem,
        source_path: str | Path,
        messages_included: Iterable[str] | None = None,
        *,
        validate_locales: bool = False,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self._filesystem = filesystem
        self._source_path = Path(source_path)
        self._messages_included = (
            tuple(messages_included) if messages_included is not None else None
        )
        self._validate_locales = validate_locales
        self._renderer = renderer

    @property
    def source_path(self) -> Path:
        """Default directory to scan."""
        return self._source_path

    @property
    def renderer(self) -> TemplateRenderer:
        """Template renderer, created on first use."""
        if self._renderer is None:
            self._renderer = TemplateRenderer()
        return self._renderer

    def _collect(self, options: GenerateOptions) -> _Collected:
        root = Path(options.source_path) if options.source_path is not None else self._source_path
        group_filter = (
            options.messages_included
            if options.messages_included is not None
            else self._messages_included
        )

        scanner = SourceTreeScanner(
            self._filesystem, root, validate_locales=self._validate_locales
        )
        merger = MessageMerger(self._filesystem, root, group_filter, sort=options.sort)
        resources = tuple(r for r in scanner.scan() if merger.includes(r))
        return _Collected(resources=resources, messages=merger.merge(resources))

    def get_messages(self, options: GenerateOptions | None = None) -> Messages:
        """Scan and merge without rendering.

        Raises:
            SourceNotFoundError: If the scan root does not exist
            ResourceParseError: If a resource cannot be decoded
        """
        return self._collect(options or GenerateOptions()).messages

    def render(self, options: GenerateOptions | None = None) -> str:
        """Scan, merge and render, returning the output text.

        Raises:
            SourceNotFoundError: If the scan root does not exist
            ResourceParseError: If a resource cannot be decoded
            TemplateError: If the template is missing a handlebar
        """
        options = options or GenerateOptions()
        return self._render(options, self._collect(options).messages)

    def _render(self, options: GenerateOptions, messages: Messages) -> str:
        if options.json_only:
            return serialize_messages(messages)
        return self.renderer.render(messages, include_library=options.include_library)

    def generate(
        self, target: str | Path, options: GenerateOptions | None = None
    ) -> GenerationResult:
        """Run the full pipeline and write the output file.

        Args:
            target: Output file path; overwritten if it exists
            options: Per-run options

        Returns:
            Summary of the run

        Raises:
            SourceNotFoundError: If the scan root does not exist
            ResourceParseError: If a resource cannot be decoded
            TemplateError: If the template is missing a handlebar
            OutputWriteError: If the output cannot be written
        """
        options = options or GenerateOptions()
        target_path = Path(target)
        collected = self._collect(options)
        output = self._render(options, collected.messages)

        try:
            self._filesystem.write_text(target_path, output)
        except OSError as e:
            raise OutputWriteError(
                ErrorTemplate.output_write_failed(str(target_path), str(e))
            ) from e

        result = GenerationResult(
            target=target_path,
            file_count=len(collected.resources),
            message_count=len(collected.messages),
            locales=tuple(sorted({r.locale for r in collected.resources})),
            included_library=options.include_library and not options.json_only,
            json_only=options.json_only,
        )
        logger.info(
            "Generated %s: %d messages from %d files (%s)",
            target_path,
            result.message_count,
            result.file_count,
            ", ".join(result.locales) or "no locales",
        )
        return result

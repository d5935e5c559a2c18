"""langjs - bundle server-side translation files into a client-side script.

Scans a language directory laid out as ``<locale>/[vendor/<namespace>/]<group>.<ext>``,
flattens every resource into dotted keys (``en.acme::messages.welcome``) and
renders them, optionally with the lang.js runtime library, into one
JavaScript file.

Public API:
    LangJsGenerator - Scan, merge, render and write in one call
    GenerateOptions - Per-run options (source override, filter, --no-lib, --json)
    SourceTreeScanner - Resource discovery
    MessageMerger - Decoding, filtering and flattening
    TemplateRenderer - Template handlebar substitution
    LocalFileSystem - Default file access (atomic writes)

Exceptions:
    LangJsError - Base exception class
    SourceNotFoundError - Scan root missing
    SourceReadError - Directory under the scan root cannot be listed
    ResourceParseError - Undecodable resource
    TemplateError - Corrupted template asset
"""

from .diagnostics import (
    ConfigError,
    LangJsError,
    OutputWriteError,
    ResourceParseError,
    SourceNotFoundError,
    SourceReadError,
    TemplateError,
)
from .generator import GenerateOptions, GenerationResult, LangJsGenerator
from .merging import MessageMerger
from .rendering import TemplateRenderer
from .sources import LocalFileSystem, ResourceFile, SourceTreeScanner

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("langjs")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigError",
    "GenerateOptions",
    "GenerationResult",
    "LangJsError",
    "LangJsGenerator",
    "LocalFileSystem",
    "MessageMerger",
    "OutputWriteError",
    "ResourceFile",
    "ResourceParseError",
    "SourceNotFoundError",
    "SourceReadError",
    "SourceTreeScanner",
    "TemplateError",
    "TemplateRenderer",
    "__version__",
]

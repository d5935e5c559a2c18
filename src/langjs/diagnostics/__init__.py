"""Diagnostic system for langjs errors.

Provides structured error diagnostics with codes, paths and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigError,
    LangJsError,
    OutputWriteError,
    ResourceParseError,
    SourceNotFoundError,
    SourceReadError,
    TemplateError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LangJsError",
    "OutputFormat",
    "OutputWriteError",
    "ResourceParseError",
    "SourceNotFoundError",
    "SourceReadError",
    "TemplateError",
]

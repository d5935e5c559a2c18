"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
langjs exception.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by pipeline stage:
        1000-1999: Source tree errors (scan root missing, unreadable directory,
                   unknown locale warnings)
        2000-2999: Resource errors (decoding, structure, flattening)
        3000-3999: Template errors (corrupted template asset)
        4000-4999: Output errors (writing the target file)
        5000-5999: Configuration errors
    """

    # Source tree errors (1000-1999)
    SOURCE_NOT_FOUND = 1001
    SOURCE_UNREADABLE = 1002
    UNKNOWN_LOCALE = 1101

    # Resource errors (2000-2999)
    RESOURCE_PARSE_FAILED = 2001
    RESOURCE_NOT_MAPPING = 2002
    NESTING_DEPTH_EXCEEDED = 2003
    INVALID_VALUE_TYPE = 2004

    # Template errors (3000-3999)
    TEMPLATE_PLACEHOLDER_MISSING = 3001

    # Output errors (4000-4999)
    OUTPUT_WRITE_FAILED = 4001

    # Configuration errors (5000-5999)
    CONFIG_INVALID = 5001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        path: File or directory the diagnostic refers to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[SOURCE_NOT_FOUND]: Source directory 'lang' does not exist
              --> lang
              = help: Pass an existing directory with --source

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

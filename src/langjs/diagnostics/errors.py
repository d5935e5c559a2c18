"""langjs exception hierarchy with structured diagnostics.

Every failure of a generation run is fatal: the run aborts and no output
file is written. All exceptions may carry a Diagnostic for rich reporting.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LangJsError(Exception):
    """Base exception for all langjs errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LangJsError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SourceNotFoundError(LangJsError):
    """Scan root does not exist or is not a directory."""


class ResourceParseError(LangJsError):
    """A resource file cannot be decoded as structured key/value data.

    Attributes:
        path: Path of the offending resource, relative to the scan root
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize ResourceParseError.

        Args:
            message: Error message string OR Diagnostic object
            path: Path of the offending resource
        """
        super().__init__(message)
        self.path = path


class SourceReadError(LangJsError):
    """A directory under the scan root cannot be listed."""


class TemplateError(LangJsError):
    """Output template is missing a required handlebar."""


class OutputWriteError(LangJsError):
    """Rendered output could not be written to the target path."""


class ConfigError(LangJsError):
    """Configuration file is unreadable or holds invalid values."""

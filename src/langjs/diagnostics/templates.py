"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def source_not_found(path: str) -> Diagnostic:
        """Scan root missing or not a directory.

        Args:
            path: The configured or overridden source directory

        Returns:
            Diagnostic for SOURCE_NOT_FOUND
        """
        msg = f"Source directory '{path}' does not exist"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_NOT_FOUND,
            message=msg,
            hint="Pass an existing language directory with --source",
            path=path,
        )

    @staticmethod
    def source_unreadable(path: str, reason: str) -> Diagnostic:
        """Directory inside the scan root cannot be listed.

        Args:
            path: Directory that failed to list
            reason: OS error description

        Returns:
            Diagnostic for SOURCE_UNREADABLE
        """
        msg = f"Cannot list directory '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_UNREADABLE,
            message=msg,
            hint="Check the directory permissions",
            path=path,
        )

    @staticmethod
    def unknown_locale(locale: str, root: str) -> Diagnostic:
        """Locale directory name Babel does not recognize (warning only)."""
        msg = f"Unknown locale '{locale}' in '{root}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=msg,
            hint="Locale directories are usually named like 'en', 'pt_BR' or 'zh-Hant'",
            path=f"{root}/{locale}",
            severity="warning",
        )

    @staticmethod
    def resource_parse_failed(path: str, reason: str) -> Diagnostic:
        """Resource content could not be decoded.

        Args:
            path: Resource path relative to the scan root
            reason: Decoder error description

        Returns:
            Diagnostic for RESOURCE_PARSE_FAILED
        """
        msg = f"Error while decoding '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_PARSE_FAILED,
            message=msg,
            hint="Fix the syntax of the resource file or move it out of the source tree",
            path=path,
        )

    @staticmethod
    def resource_not_mapping(path: str, found: str) -> Diagnostic:
        """Resource decoded to something other than a mapping.

        Args:
            path: Resource path relative to the scan root
            found: Type name of the decoded top-level value

        Returns:
            Diagnostic for RESOURCE_NOT_MAPPING
        """
        msg = f"Resource '{path}' must contain a mapping of keys to messages, got {found}"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_NOT_MAPPING,
            message=msg,
            hint="Wrap the messages in a top-level object",
            path=path,
        )

    @staticmethod
    def nesting_depth_exceeded(path: str, key: str, max_depth: int) -> Diagnostic:
        """Resource nests deeper than the flattener allows.

        Args:
            path: Resource path relative to the scan root
            key: Dotted key at which the limit was hit
            max_depth: Configured nesting limit

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded at '{key}' in '{path}'"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the message structure",
            path=path,
        )

    @staticmethod
    def invalid_value_type(path: str, key: str, found: str) -> Diagnostic:
        """Leaf value is not a string or scalar.

        Args:
            path: Resource path relative to the scan root
            key: Dotted key holding the value
            found: Type name of the value

        Returns:
            Diagnostic for INVALID_VALUE_TYPE
        """
        msg = f"Message '{key}' in '{path}' has unsupported value type {found}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE_TYPE,
            message=msg,
            hint="Message values must be strings, numbers or booleans",
            path=path,
        )

    @staticmethod
    def template_placeholder_missing(placeholder: str, template: str) -> Diagnostic:
        """Template asset lacks a handlebar.

        Args:
            placeholder: The missing handlebar token
            template: Template name for reporting

        Returns:
            Diagnostic for TEMPLATE_PLACEHOLDER_MISSING
        """
        msg = f"Template '{template}' is missing the {placeholder} handlebar"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_PLACEHOLDER_MISSING,
            message=msg,
            hint="The template asset is corrupted; reinstall langjs",
            path=template,
        )

    @staticmethod
    def output_write_failed(path: str, reason: str) -> Diagnostic:
        """Target file could not be written.

        Args:
            path: Output path
            reason: OS error description

        Returns:
            Diagnostic for OUTPUT_WRITE_FAILED
        """
        msg = f"Could not write '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.OUTPUT_WRITE_FAILED,
            message=msg,
            hint="Check that the parent directory exists and is writable",
            path=path,
        )

    @staticmethod
    def config_invalid(path: str, reason: str) -> Diagnostic:
        """Configuration file is unusable.

        Args:
            path: Configuration file path
            reason: What is wrong with it

        Returns:
            Diagnostic for CONFIG_INVALID
        """
        msg = f"Invalid configuration in '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_INVALID,
            message=msg,
            hint="See the [tool.langjs] section reference in README",
            path=path,
        )

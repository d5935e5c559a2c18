"""Shared constants for langjs.

Centralizes the directory conventions, recognized resource extensions,
template handlebars and limits used across the sources, merging and
rendering packages. Placing them here avoids circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Source tree conventions
    "RESOURCE_EXTENSIONS",
    "VENDOR_DIRECTORY",
    "NAMESPACE_SEPARATOR",
    "KEY_SEPARATOR",
    "GROUP_PATH_SEPARATOR",
    # Template handlebars
    "LIBRARY_PLACEHOLDER",
    "MESSAGES_PLACEHOLDER",
    "TEMPLATE_FILENAME",
    "LIBRARY_FILENAME",
    # Limits
    "MAX_NESTING_DEPTH",
    # Defaults
    "DEFAULT_SOURCE_PATH",
    "DEFAULT_OUTPUT_PATH",
    "CONFIG_TABLE",
    "PLURAL_SEPARATOR",
]

# ============================================================================
# SOURCE TREE CONVENTIONS
# ============================================================================

# Allow-list of translation data extensions, matched case-insensitively
# against the file suffix. Anything else under the root is not a resource.
RESOURCE_EXTENSIONS: frozenset[str] = frozenset({".json", ".yaml", ".yml", ".po"})

# <locale>/vendor/<namespace>/... and vendor/<namespace>/<locale>/...
VENDOR_DIRECTORY: str = "vendor"

NAMESPACE_SEPARATOR: str = "::"

KEY_SEPARATOR: str = "."

GROUP_PATH_SEPARATOR: str = "/"

# ============================================================================
# TEMPLATE HANDLEBARS
# ============================================================================

# The statement form of the library handlebar (with its trailing semicolon)
# is replaced so that an excluded library leaves no stray expression behind.
LIBRARY_PLACEHOLDER: str = "'{ langjs }';"

MESSAGES_PLACEHOLDER: str = "'{ messages }'"

TEMPLATE_FILENAME: str = "langjs_with_messages.js"

LIBRARY_FILENAME: str = "lang.js"

# ============================================================================
# LIMITS
# ============================================================================

# Maximum mapping/list nesting inside a single resource file. Keeps the
# recursive flattener well below the interpreter recursion limit.
MAX_NESTING_DEPTH: int = 100

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_SOURCE_PATH: str = "resources/lang"

DEFAULT_OUTPUT_PATH: str = "public/js/messages.js"

# [tool.langjs] in pyproject.toml
CONFIG_TABLE: tuple[str, str] = ("tool", "langjs")

# Plural forms of a gettext message are joined with the runtime's
# pipe syntax: "apple|apples".
PLURAL_SEPARATOR: str = "|"

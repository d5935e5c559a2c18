"""Enumerations for langjs type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class ResourceFormat(StrEnum):
    """Structured serialization used by a resource file.

    StrEnum provides automatic string conversion: str(ResourceFormat.JSON) == "json"
    """

    JSON = "json"
    """JSON object: {"welcome": "Hi"}"""

    YAML = "yaml"
    """YAML mapping (.yaml or .yml): welcome: Hi"""

    PO = "po"
    """gettext catalog: msgid "welcome" / msgstr "Hi" """

    @classmethod
    def from_extension(cls, extension: str) -> "ResourceFormat":
        """Map a file extension (with or without the dot) to its format.

        Raises:
            ValueError: If the extension is not a recognized resource extension
        """
        suffix = extension.lower().lstrip(".")
        match suffix:
            case "json":
                return cls.JSON
            case "yaml" | "yml":
                return cls.YAML
            case "po":
                return cls.PO
        msg = f"Unrecognized resource extension: '{extension}'"
        raise ValueError(msg)


__all__ = [
    "ResourceFormat",
]

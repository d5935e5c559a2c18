"""Template renderer.

Serializes the aggregate messages and substitutes them, together with the
optional runtime library, into the packaged output template. The template
carries two handlebars:

    '{ langjs }';     replaced by lang.js (or nothing with --no-lib)
    '{ messages }'    replaced by the JSON object literal of messages

Substitution is a single pass over the template text, so handlebar-like
text inside the library or the messages is never substituted again.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from importlib import resources

from langjs.constants import (
    LIBRARY_FILENAME,
    LIBRARY_PLACEHOLDER,
    MESSAGES_PLACEHOLDER,
    TEMPLATE_FILENAME,
)
from langjs.diagnostics import ErrorTemplate, TemplateError

__all__ = [
    "TemplateRenderer",
    "load_library",
    "load_template",
    "serialize_messages",
]

logger = logging.getLogger(__name__)

_HANDLEBARS = re.compile(
    "|".join(re.escape(token) for token in (LIBRARY_PLACEHOLDER, MESSAGES_PLACEHOLDER))
)

# Legal in JSON strings, line terminators in pre-ES2019 JavaScript string literals
_JS_LINE_TERMINATORS = {"\u2028": "\\u2028", "\u2029": "\\u2029"}


def _read_asset(name: str) -> str:
    return resources.files("langjs.rendering").joinpath("templates", name).read_text(
        encoding="utf-8"
    )


def load_template() -> str:
    """Return the packaged output template text."""
    return _read_asset(TEMPLATE_FILENAME)


def load_library() -> str:
    """Return the packaged lang.js runtime library text."""
    return _read_asset(LIBRARY_FILENAME)


def serialize_messages(messages: Mapping[str, str]) -> str:
    """Serialize messages as a compact JSON object literal.

    Key order follows the mapping. Non-ASCII text is kept as UTF-8;
    U+2028 and U+2029 are escaped so the literal is valid JavaScript.

    Example:
        >>> serialize_messages({"en.messages.welcome": "Hi"})
        '{"en.messages.welcome":"Hi"}'
    """
    payload = json.dumps(messages, ensure_ascii=False, separators=(",", ":"))
    for char, escape in _JS_LINE_TERMINATORS.items():
        payload = payload.replace(char, escape)
    return payload


class TemplateRenderer:
    """Render messages into the output template.

    Args:
        template: Template text (default: packaged langjs_with_messages.js)
        library: Runtime library text (default: packaged lang.js, read lazily)
        template_name: Name used in diagnostics

    Example:
        >>> renderer = TemplateRenderer()
        >>> script = renderer.render({"en.messages.welcome": "Hi"}, include_library=False)
        >>> "'{ messages }'" in script
        False
    """

    def __init__(
        self,
        template: str | None = None,
        library: str | None = None,
        *,
        template_name: str = TEMPLATE_FILENAME,
    ) -> None:
        self._template = template if template is not None else load_template()
        self._library = library
        self._template_name = template_name

    @property
    def library(self) -> str:
        """Runtime library text substituted when the library is included."""
        if self._library is None:
            self._library = load_library()
        return self._library

    def check_template(self) -> None:
        """Verify both handlebars are present.

        Raises:
            TemplateError: If a handlebar is missing from the template
        """
        for token in (LIBRARY_PLACEHOLDER, MESSAGES_PLACEHOLDER):
            if token not in self._template:
                raise TemplateError(
                    ErrorTemplate.template_placeholder_missing(token, self._template_name)
                )

    def render(self, messages: Mapping[str, str], *, include_library: bool = True) -> str:
        """Produce the output script.

        Args:
            messages: Aggregate dotted-key mapping, in output order
            include_library: Embed lang.js (False leaves its region empty)

        Returns:
            Template text with both handlebars replaced

        Raises:
            TemplateError: If a handlebar is missing from the template
        """
        self.check_template()
        replacements = {
            LIBRARY_PLACEHOLDER: self.library if include_library else "",
            MESSAGES_PLACEHOLDER: serialize_messages(messages),
        }
        output = _HANDLEBARS.sub(lambda match: replacements[match.group(0)], self._template)
        logger.debug(
            "Rendered %s with %d messages (library %s)",
            self._template_name,
            len(messages),
            "included" if include_library else "excluded",
        )
        return output

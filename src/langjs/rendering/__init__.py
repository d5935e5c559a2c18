"""Output rendering: template handlebar substitution and message serialization.

Python 3.13+.
"""

from .renderer import TemplateRenderer, load_library, load_template, serialize_messages

__all__ = [
    "TemplateRenderer",
    "load_library",
    "load_template",
    "serialize_messages",
]

"""HTML escaping for text and attribute values."""

from __future__ import annotations

from typing import Any

# str.translate substitutes each code point once, so entities produced for one
# character are never rescanned for another.
_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def escape_html(value: Any) -> str:
    """Replace the five HTML-significant characters with entities.

    ``None`` becomes the empty string and other non-string values are passed
    through ``str()`` first. Everything outside ``&<>"'`` is left untouched.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return value.translate(_HTML_ESCAPES)


__all__ = ["escape_html"]

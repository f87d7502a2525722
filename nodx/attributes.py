"""Named attribute helpers.

Each helper takes the attribute value and returns an ``AttributeNode``.
Helpers whose attribute name is a Python keyword or builtin carry a trailing
underscore (``class_``, ``for_``, ``id_``).
"""

from __future__ import annotations

from typing import Callable

from .builders import attr
from .nodes import AttributeNode

AttributeHelper = Callable[[str], AttributeNode]


def _attribute(name: str) -> AttributeHelper:
    def helper(value: str) -> AttributeNode:
        return attr(name, value)

    helper.__name__ = name.replace("-", "_")
    helper.__doc__ = f"``{name}`` attribute."
    return helper


id_ = _attribute("id")
class_ = _attribute("class")
style = _attribute("style")
src = _attribute("src")
href = _attribute("href")
alt = _attribute("alt")
type_ = _attribute("type")
value = _attribute("value")
placeholder = _attribute("placeholder")
checked = _attribute("checked")
disabled = _attribute("disabled")
selected = _attribute("selected")
readonly = _attribute("readonly")
required = _attribute("required")
min_ = _attribute("min")
max_ = _attribute("max")
step = _attribute("step")
for_ = _attribute("for")
name = _attribute("name")
rel = _attribute("rel")
title = _attribute("title")
lang = _attribute("lang")
charset = _attribute("charset")
content = _attribute("content")
width = _attribute("width")
height = _attribute("height")
target = _attribute("target")
action = _attribute("action")
method = _attribute("method")


def data(key: str, value: str) -> AttributeNode:
    """``data-<key>`` attribute."""
    return attr(f"data-{key}", value)


def aria(key: str, value: str) -> AttributeNode:
    """``aria-<key>`` attribute."""
    return attr(f"aria-{key}", value)


__all__ = [
    "action",
    "alt",
    "aria",
    "charset",
    "checked",
    "class_",
    "content",
    "data",
    "disabled",
    "for_",
    "height",
    "href",
    "id_",
    "lang",
    "max_",
    "method",
    "min_",
    "name",
    "placeholder",
    "readonly",
    "rel",
    "required",
    "selected",
    "src",
    "step",
    "style",
    "target",
    "title",
    "type_",
    "value",
    "width",
]

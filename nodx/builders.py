"""Constructors and combinators for building node trees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, TypeVar, Union

from .escape import escape_html
from .nodes import AttributeNode, ElementNode, Node, TextNode

T = TypeVar("T")

ClassArg = Union[str, Mapping[str, bool]]


def text(value: str) -> TextNode:
    """Text node with ``&<>"'`` escaped.

    Example:
        text('<b>"hi"</b>').render()
        # '&lt;b&gt;&quot;hi&quot;&lt;/b&gt;'
    """
    return TextNode(escape_html(value))


def raw(value: str) -> TextNode:
    """Text node emitted without escaping. Only for trusted markup."""
    return TextNode("" if value is None else value)


def attr(name: str, value: str) -> AttributeNode:
    """Attribute node; the value is escaped when rendered."""
    return AttributeNode("" if name is None else name, "" if value is None else value)


def el(tag: str, *children: Any) -> ElementNode:
    """Element with a closing tag, e.g. ``el("div", attr("id", "x"), text("hi"))``."""
    return ElementNode(False, tag, children)


def el_void(tag: str, *children: Any) -> ElementNode:
    """Void element such as ``img`` or ``br``; content children are dropped."""
    return ElementNode(True, tag, children)


def group(*children: Any) -> ElementNode:
    """Concatenate children without adding any markup."""
    return ElementNode(False, "", children)


def ifx(condition: Any, *children: Any) -> ElementNode:
    """Group ``children`` when ``condition`` is truthy, otherwise an empty group."""
    return group(*children) if condition else group()


def mapx(items: Iterable[T], fn: Callable[[T], Node]) -> ElementNode:
    """Group of ``fn(item)`` for each item, in input order."""
    if items is None:
        return group()
    return group(*(fn(item) for item in items))


def classx(*classes: ClassArg) -> AttributeNode:
    """Build a ``class`` attribute from names and ``{name: bool}`` mappings.

    Strings are used verbatim; mapping keys are included when their value is
    ``True``. Other argument and value types are ignored.

    Example:
        classx("btn", {"btn-primary": True, "btn-disabled": False})
        # renders ' class="btn btn-primary"'
    """
    class_list: List[str] = []
    for item in classes:
        if isinstance(item, str):
            class_list.append(item)
        elif isinstance(item, Mapping):
            for key, enabled in item.items():
                if isinstance(enabled, bool) and enabled:
                    class_list.append(str(key))
    return attr("class", " ".join(class_list))


__all__ = [
    "ClassArg",
    "attr",
    "classx",
    "el",
    "el_void",
    "group",
    "ifx",
    "mapx",
    "raw",
    "text",
]

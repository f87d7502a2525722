"""Build HTML from trees of text, attribute and element nodes.

Example:
    from nodx import attr, classx, el, text

    el("a", attr("href", "/"), classx("nav", {"active": True}), text("Home")).render()
    # '<a href="/" class="nav active">Home</a>'
"""

from .builders import attr, classx, el, el_void, group, ifx, mapx, raw, text
from .escape import escape_html
from .nodes import AttributeNode, ElementNode, Node, TextNode, render

__all__ = [
    # Nodes
    "Node",
    "TextNode",
    "AttributeNode",
    "ElementNode",
    "render",
    # Builders
    "text",
    "raw",
    "attr",
    "el",
    "el_void",
    "group",
    "ifx",
    "mapx",
    "classx",
    # Escaping
    "escape_html",
]

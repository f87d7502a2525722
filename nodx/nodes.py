"""Node model for HTML serialization.

A document is a tree of three node kinds. ``TextNode`` holds markup that is
emitted verbatim, ``AttributeNode`` holds one ``name="value"`` pair and
``ElementNode`` holds a tag plus an ordered tuple of children. All nodes are
frozen, so a tree can be rendered any number of times, from any thread.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple

from .escape import escape_html


class Node:
    """Base class for everything that renders to HTML."""

    __slots__ = ()

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        # markupsafe/Jinja2 protocol: rendered nodes are already safe markup.
        return self.render()


@dataclass(frozen=True)
class TextNode(Node):
    """Text emitted as-is. Escape before construction if it is untrusted."""

    text: str = ""

    def render(self) -> str:
        if self.text is None:
            return ""
        return self.text if isinstance(self.text, str) else str(self.text)


@dataclass(frozen=True)
class AttributeNode(Node):
    """A single attribute. An empty name renders nothing."""

    name: str = ""
    value: str = ""

    def render(self) -> str:
        if not self.name:
            return ""
        return f' {self.name}="{escape_html(self.value)}"'


@dataclass(frozen=True)
class ElementNode(Node):
    """An HTML element.

    Attribute children are rendered inside the opening tag and element/text
    children between the tags, each in their original order. Any other child
    value is ignored. An empty ``tag`` renders only the content, which is how
    groups are built; void elements never render content or a closing tag.
    """

    is_void: bool = False
    tag: str = ""
    children: Tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children or ()))

    def render(self) -> str:
        tag = self.tag or ""
        skip_content = bool(tag) and self.is_void

        attr_parts: List[str] = []
        content_parts: List[str] = []
        for child in self.children:
            if isinstance(child, AttributeNode):
                attr_parts.append(child.render())
            elif isinstance(child, (ElementNode, TextNode)):
                if not skip_content:
                    content_parts.append(child.render())

        if not tag:
            return "".join(content_parts)

        attrs = "".join(attr_parts)
        if self.is_void:
            return f"<{tag}{attrs}>"
        return f"<{tag}{attrs}>{''.join(content_parts)}</{tag}>"


def render(node: Any) -> str:
    """Render ``node`` to HTML; values that are not nodes render as ``""``."""
    if isinstance(node, (ElementNode, AttributeNode, TextNode)):
        return node.render()
    return ""


__all__ = ["AttributeNode", "ElementNode", "Node", "TextNode", "render"]

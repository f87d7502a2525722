"""Named element helpers.

Helpers for tags in ``VOID_TAGS`` build void elements; every other helper
builds an element with a closing tag.
"""

from __future__ import annotations

from typing import Any, Callable

from .builders import el, el_void, raw
from .nodes import ElementNode, TextNode

ElementHelper = Callable[..., ElementNode]

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def is_void_tag(tag: str) -> bool:
    return (tag or "").lower() in VOID_TAGS


def _element(tag: str) -> ElementHelper:
    build = el_void if is_void_tag(tag) else el

    def helper(*children: Any) -> ElementNode:
        return build(tag, *children)

    helper.__name__ = tag
    helper.__doc__ = f"``<{tag}>`` element."
    return helper


def doctype() -> TextNode:
    """The HTML5 doctype declaration."""
    return raw("<!DOCTYPE html>")


# Document structure
html = _element("html")
head = _element("head")
title = _element("title")
meta = _element("meta")
link = _element("link")
script = _element("script")
style = _element("style")
body = _element("body")

# Sections
header = _element("header")
footer = _element("footer")
main = _element("main")
nav = _element("nav")
section = _element("section")
article = _element("article")
aside = _element("aside")
div = _element("div")
span = _element("span")
h1 = _element("h1")
h2 = _element("h2")
h3 = _element("h3")
h4 = _element("h4")
h5 = _element("h5")
h6 = _element("h6")

# Text
p = _element("p")
a = _element("a")
strong = _element("strong")
em = _element("em")
code = _element("code")
pre = _element("pre")
blockquote = _element("blockquote")
br = _element("br")
hr = _element("hr")

# Lists and tables
ul = _element("ul")
ol = _element("ol")
li = _element("li")
table = _element("table")
thead = _element("thead")
tbody = _element("tbody")
tr = _element("tr")
th = _element("th")
td = _element("td")

# Media
img = _element("img")
figure = _element("figure")
figcaption = _element("figcaption")
source = _element("source")

# Forms
form = _element("form")
label = _element("label")
input_ = _element("input")
textarea = _element("textarea")
select = _element("select")
option = _element("option")
button = _element("button")


__all__ = [
    "VOID_TAGS",
    "a",
    "article",
    "aside",
    "blockquote",
    "body",
    "br",
    "button",
    "code",
    "div",
    "doctype",
    "em",
    "figcaption",
    "figure",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "hr",
    "html",
    "img",
    "input_",
    "is_void_tag",
    "label",
    "li",
    "link",
    "main",
    "meta",
    "nav",
    "ol",
    "option",
    "p",
    "pre",
    "script",
    "section",
    "select",
    "source",
    "span",
    "strong",
    "style",
    "table",
    "tbody",
    "td",
    "textarea",
    "th",
    "thead",
    "title",
    "tr",
    "ul",
]

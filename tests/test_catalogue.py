import pytest

from nodx import attributes as at
from nodx import elements as h
from nodx.builders import text


def test_attribute_helpers_use_html_names() -> None:
    assert at.href("https://example.com").render() == ' href="https://example.com"'
    assert at.class_("btn").render() == ' class="btn"'
    assert at.for_("email").render() == ' for="email"'
    assert at.id_("main").render() == ' id="main"'
    assert at.type_("text").render() == ' type="text"'
    assert at.min_("1").render() == ' min="1"'


def test_prefixed_attribute_helpers() -> None:
    assert at.data("toggle", "modal").render() == ' data-toggle="modal"'
    assert at.aria("label", "Open Modal").render() == ' aria-label="Open Modal"'


def test_helpers_expose_readable_names() -> None:
    assert at.class_.__name__ == "class"
    assert h.input_.__name__ == "input"


def test_element_helpers() -> None:
    page = h.div(at.class_("card"), h.h2(text("Title")), h.p(text("Body")))
    assert page.render() == '<div class="card"><h2>Title</h2><p>Body</p></div>'


def test_anchor_is_not_void() -> None:
    assert h.a(at.href("/"), text("Home")).render() == '<a href="/">Home</a>'


@pytest.mark.parametrize("helper", [h.img, h.br, h.hr, h.input_, h.meta, h.link, h.source])
def test_void_helpers_never_close(helper) -> None:
    html = helper(at.title("x"), text("dropped")).render()
    assert html.startswith("<") and html.endswith('title="x">')
    assert "</" not in html
    assert "dropped" not in html


def test_is_void_tag() -> None:
    assert h.is_void_tag("img")
    assert h.is_void_tag("BR")
    assert not h.is_void_tag("div")
    assert not h.is_void_tag("")
    assert not h.is_void_tag(None)


def test_doctype() -> None:
    assert h.doctype().render() == "<!DOCTYPE html>"

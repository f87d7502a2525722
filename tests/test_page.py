from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from jinja2 import UndefinedError

from nodx.models import Document
from nodx.page import DEFAULT_LAYOUT, jinja_env, render_page


def _doc(**overrides) -> Document:
    payload = {
        "title": "Tom & Jerry",
        "lang": "en",
        "body": [
            {
                "type": "element",
                "tag": "main",
                "children": [
                    {"type": "element", "tag": "h1", "children": [{"type": "text", "text": "Hello <World>"}]},
                    {
                        "type": "element",
                        "tag": "ul",
                        "children": [
                            {"type": "element", "tag": "li", "children": [{"type": "text", "text": "one"}]},
                            {"type": "element", "tag": "li", "children": [{"type": "text", "text": "two"}]},
                        ],
                    },
                ],
            }
        ],
    }
    payload.update(overrides)
    return Document.model_validate(payload)


def test_fragment_without_layout() -> None:
    html = render_page(_doc())
    assert html == "<main><h1>Hello &lt;World&gt;</h1><ul><li>one</li><li>two</li></ul></main>"


def test_default_layout_embeds_body_once() -> None:
    html = render_page(_doc(layout=DEFAULT_LAYOUT))
    assert html.startswith("<!DOCTYPE html>")
    assert "&amp;lt;" not in html

    soup = BeautifulSoup(html, "html.parser")
    assert soup.title.string == "Tom & Jerry"
    assert soup.html["lang"] == "en"
    assert soup.select_one("main h1").get_text() == "Hello <World>"
    assert [li.get_text() for li in soup.select("main ul li")] == ["one", "two"]


def test_title_is_escaped_by_layout() -> None:
    html = render_page(_doc(layout=DEFAULT_LAYOUT, title="<script>"))
    assert "<title>&lt;script&gt;</title>" in html


def test_custom_template_dir_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / DEFAULT_LAYOUT).write_text("<section>{{ body }}</section>", encoding="utf-8")
    html = render_page(_doc(layout=DEFAULT_LAYOUT), template_dir=tmp_path)
    assert html.startswith("<section><main>")


def test_strict_undefined(tmp_path: Path) -> None:
    (tmp_path / "strict.html.jinja").write_text("{{ missing_value }}", encoding="utf-8")
    template = jinja_env(tmp_path).get_template("strict.html.jinja")
    with pytest.raises(UndefinedError):
        template.render()

"""Render documents standalone or inside a Jinja2 layout."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .document import build_document
from .models import Document

DEFAULT_LAYOUT = "page.html.jinja"


def shared_templates_dir() -> Path:
    """Directory containing the layouts shipped with nodx."""

    return Path(__file__).parent / "templates"


def jinja_env(template_dir: Optional[Path] = None) -> Environment:
    """Create a Jinja environment searching ``template_dir`` before the shared layouts."""

    template_dirs = [shared_templates_dir()]
    if template_dir is not None:
        template_dirs.insert(0, Path(template_dir))
    return Environment(
        loader=FileSystemLoader(template_dirs),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_page(doc: Document, template_dir: Optional[Path] = None) -> str:
    """Render ``doc`` to HTML.

    Without a layout the body is returned as a fragment. With one, the body
    node is handed to the template as ``body`` and emitted unescaped through
    its ``__html__`` method, while ``title`` and ``lang`` are autoescaped.
    """

    body = build_document(doc)
    if not doc.layout:
        return body.render()

    template = jinja_env(template_dir).get_template(doc.layout)
    return template.render(title=doc.title, lang=doc.lang, body=body)


__all__ = ["DEFAULT_LAYOUT", "jinja_env", "render_page", "shared_templates_dir"]

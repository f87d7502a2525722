"""Command-line interface for nodx."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from .escape import escape_html
from .document import load_document
from .page import DEFAULT_LAYOUT, render_page


def _handle_render(args: argparse.Namespace) -> None:
    doc = load_document(Path(args.input))
    if args.page and not doc.layout:
        doc = doc.model_copy(update={"layout": DEFAULT_LAYOUT})

    template_dir = Path(args.templates) if args.templates else None
    output = render_page(doc, template_dir=template_dir)

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output + "\n", encoding="utf-8")
    else:
        sys.stdout.write(output + "\n")


def _handle_escape(args: argparse.Namespace) -> None:
    source = " ".join(args.text) if args.text else sys.stdin.read()
    sys.stdout.write(escape_html(source))
    if args.text:
        sys.stdout.write("\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nodx", description="Build HTML from declarative node documents."
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a document to HTML.",
        description="Validate a YAML/JSON document and render it to HTML.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the document YAML or JSON file.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the HTML. Defaults to stdout.",
    )
    render_parser.add_argument(
        "--templates",
        default=None,
        help="Directory searched for layouts before the built-in ones.",
    )
    render_parser.add_argument(
        "--page",
        action="store_true",
        help=f"Wrap the body in {DEFAULT_LAYOUT} when the document names no layout.",
    )
    render_parser.set_defaults(func=_handle_render)

    escape_parser = subparsers.add_parser(
        "escape",
        help="Escape text for HTML.",
        description="Escape the arguments (joined by spaces), or stdin when none are given.",
    )
    escape_parser.add_argument("text", nargs="*", help="Text to escape.")
    escape_parser.set_defaults(func=_handle_escape)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()

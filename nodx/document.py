"""Compile declarative documents into node trees."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import List

import yaml
from pydantic import ValidationError

from .builders import attr, classx, group, raw, text
from .elements import is_void_tag
from .io_utils import read_structured, warn
from .models import AttrSpec, ClassesSpec, Document, ElementSpec, NodeSpec, RawSpec, TextSpec
from .nodes import ElementNode, Node


def load_document(path: Path) -> Document:
    """Load and validate a document from a YAML or JSON file."""

    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")
    try:
        payload = read_structured(path) or {}
        return Document.model_validate(payload)
    except (json.JSONDecodeError, yaml.YAMLError, ValidationError) as exc:
        raise SystemExit(f"Invalid document {path}: {exc}") from exc


def _check_element(spec: ElementSpec, is_void: bool, where: str) -> None:
    names = [child.name for child in spec.children if isinstance(child, AttrSpec) and child.name]
    for name, count in Counter(names).items():
        if count > 1:
            warn(f"[nodx] {where}: <{spec.tag}> repeats attribute '{name}' {count} times")
    if spec.tag and is_void:
        dropped = [
            child for child in spec.children if isinstance(child, (TextSpec, RawSpec, ElementSpec))
        ]
        if dropped:
            warn(f"[nodx] {where}: content of void <{spec.tag}> is not rendered")


def build_node(spec: NodeSpec, where: str = "body") -> Node:
    """Convert one node spec (and its descendants) into a node."""

    if isinstance(spec, TextSpec):
        return text(spec.text)
    if isinstance(spec, RawSpec):
        return raw(spec.html)
    if isinstance(spec, AttrSpec):
        return attr(spec.name, spec.value)
    if isinstance(spec, ClassesSpec):
        return classx(*spec.classes)
    if isinstance(spec, ElementSpec):
        is_void = spec.void if spec.void is not None else is_void_tag(spec.tag)
        _check_element(spec, is_void, where)
        children: List[Node] = [
            build_node(child, f"{where}.children[{index}]")
            for index, child in enumerate(spec.children)
        ]
        return ElementNode(is_void, spec.tag, tuple(children))
    raise TypeError(f"Unsupported node spec: {type(spec).__name__}")


def build_document(doc: Document) -> ElementNode:
    """Group of the document's body nodes."""

    return group(*(build_node(spec, f"body[{index}]") for index, spec in enumerate(doc.body)))


__all__ = ["build_document", "build_node", "load_document"]

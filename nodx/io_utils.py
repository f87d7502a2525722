"""Utility helpers for document IO and diagnostics."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def read_structured(path: Path) -> Any:
    """Read a ``.json`` file as JSON and anything else as YAML."""
    if path.suffix.lower() == ".json":
        return read_json(path)
    return read_yaml(path)


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)

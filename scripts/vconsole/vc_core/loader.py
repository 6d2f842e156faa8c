"""Descriptor file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text())
    except (OSError, json.JSONDecodeError):
        return None


def split_descriptor(data: Any) -> tuple[dict, list]:
    if not isinstance(data, dict):
        raise ValueError("descriptor must be a JSON object")
    console = data.get("console")
    if not isinstance(console, dict):
        raise ValueError("descriptor is missing the 'console' object")
    items = data.get("items", [])
    if not isinstance(items, list):
        raise ValueError("descriptor 'items' must be a list")
    return console, items


def load_descriptor(path: Path | str) -> tuple[dict, list]:
    descriptor_path = Path(path)
    if not descriptor_path.exists():
        raise ValueError(f"descriptor path not found: {descriptor_path}")
    try:
        data = json.loads(descriptor_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON descriptor: {exc}") from exc
    return split_descriptor(data)

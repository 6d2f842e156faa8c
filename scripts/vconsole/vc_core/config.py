"""Option resolution and user config merging for the console viewer."""

from __future__ import annotations

import json
import os
from pathlib import Path

from vc_core.layout import LAYOUT_MODES
from vc_core.logs import LOG_LEVELS

DATA_ENV = "VCONSOLE_DATA"

DEFAULT_OPTIONS: dict = {
    "refresh_seconds": 5,
    "log_level": "WARNING",
    # None picks the layout from the terminal width.
    "layout": None,
}


def env_data_path() -> Path | None:
    value = os.environ.get(DATA_ENV)
    return Path(value) if value else None


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        data = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    return data


def resolve_options(config_path: str | None = None, **overrides) -> dict:
    """Merge defaults, the JSON config file and explicit (non-None) overrides."""
    resolved = dict(DEFAULT_OPTIONS)
    user_config = load_user_config(config_path)
    merged = {**user_config, **{k: v for k, v in overrides.items() if v is not None}}

    if "refresh_seconds" in merged:
        try:
            value = int(merged["refresh_seconds"])
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid refresh_seconds: {merged['refresh_seconds']!r}") from exc
        resolved["refresh_seconds"] = max(1, value)

    if "log_level" in merged:
        level = str(merged["log_level"]).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {merged['log_level']}")
        resolved["log_level"] = level

    layout = merged.get("layout")
    if layout is not None:
        if layout not in LAYOUT_MODES:
            raise ValueError(f"unknown layout: {layout}")
        resolved["layout"] = layout

    return resolved

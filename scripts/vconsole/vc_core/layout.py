"""Responsive layout mode selection by terminal width."""

from __future__ import annotations

LAYOUT_MODES = ("narrow", "medium", "wide")


def select_layout_mode(width: int) -> str:
    if width < 100:
        return "narrow"
    if width < 160:
        return "medium"
    return "wide"


def scale_factor(console_width: int, terminal_width: int) -> float:
    """Console pixels per terminal column, never below one."""
    if terminal_width <= 0:
        return 1.0
    return max(1.0, console_width / terminal_width)

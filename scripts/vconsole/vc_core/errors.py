"""Validation errors raised while decoding console and widget descriptors."""

from __future__ import annotations


class VisualConsoleError(ValueError):
    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidConsolePropsError(VisualConsoleError):
    """A required console field is missing or malformed. Fatal to construction."""


class InvalidWidgetPropsError(VisualConsoleError):
    """A required widget field is missing or malformed. Only that widget is skipped."""


class UnknownOrUnsupportedVariantError(VisualConsoleError):
    """The widget type tag is missing, unknown or has no implementation."""

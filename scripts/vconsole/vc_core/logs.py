"""Logging setup for the terminal application."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "vc_core"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
    """Attach a single RichHandler to the package logger. Safe to call repeatedly."""
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(name)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=console or Console(stderr=True), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger

"""Rich-based log handler setup."""
from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from ..core.config import LogLevel

PACKAGE_LOGGER = "browsecore"


def setup_logging(
    level: Union[LogLevel, str, int] = LogLevel.info,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Route browsecore log records to a Rich console.

    Calling this again replaces the previously installed handler.

    Args:
        level: Log level as a LogLevel, level name or number.
        console: Console to write to. Defaults to stderr.

    Returns:
        The configured package logger.
    """
    if isinstance(level, LogLevel):
        level = level.value
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger

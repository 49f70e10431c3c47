"""Logging setup for the ``factorials`` package."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "factorials"


def configure_logging(
    level: str | int = logging.WARNING, console: Console | None = None
) -> logging.Logger:
    """
    Attach a rich handler to the package logger.

    Calling it again replaces the previous handler instead of stacking another one.

    Args:
        level: Level name (e.g. ``"DEBUG"``) or number.
        console: Console to log to. Defaults to a new stderr console.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        number = logging.getLevelName(level.upper())
        if not isinstance(number, int):
            raise ValueError(f"unknown log level: {level}")
        level = number

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    )
    logger.propagate = False
    return logger

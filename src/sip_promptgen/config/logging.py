"""Logging setup using Rich for console output."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "sip_promptgen"


def setup_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """Configure the package logger with a Rich handler.

    Calling this more than once replaces the previously installed handler,
    so the CLI and tests can reconfigure the level freely.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console: Optional Rich console to log to. Defaults to stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)

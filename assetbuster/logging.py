"""Logging utilities for assetbuster runs."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "assetbuster"
LOG_PREFIX = "[buster]: "


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the assetbuster hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def buster_message(message: str) -> str:
    """Prefix a message so it can be told apart in host build output."""
    return f"{LOG_PREFIX}{message}"


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Configure the assetbuster logger with a rich console handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated CLI invocations don't duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger


__all__ = ["LOG_PREFIX", "buster_message", "configure_logging", "get_logger"]

"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "nanodiff"


def configure_logging(level: Union[int, str] = logging.WARNING, *, show_time: bool = False) -> logging.Logger:
    """Route ``nanodiff.*`` log records to stderr through Rich.

    Replaces any handler installed by a previous call, so it is safe to call
    once per CLI invocation.
    """
    resolved = level if isinstance(level, int) else getattr(logging, str(level).upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)
    logger.handlers.clear()
    logger.propagate = False

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=show_time,
        show_path=False,
        markup=False,
    )
    handler.setLevel(resolved)
    logger.addHandler(handler)
    return logger

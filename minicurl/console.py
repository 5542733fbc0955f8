"""Shared stderr console and logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

err_console = Console(stderr=True, soft_wrap=True)


def setup_logging(level: str = "WARNING") -> None:
    """Route the ``minicurl`` loggers to stderr through rich."""
    logger = logging.getLogger("minicurl")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(console=err_console, show_path=False, show_time=False)
        )
    logger.propagate = False

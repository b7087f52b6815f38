"""Shared Rich consoles and logging setup for consistent output."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Route vault's log records to the stderr console.

    Warnings and errors are always shown; ``verbose`` adds debug output.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("vault")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )

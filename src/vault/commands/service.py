"""vault service mode (no command given)."""

from __future__ import annotations

import logging

from vault.commands.help import print_usage
from vault.core.config import ConfigStore
from vault.core.errors import ExitCode

logger = logging.getLogger(__name__)


def run_service(store: ConfigStore) -> ExitCode:
    """Entry point for the periodic backup loop started by the service manager.

    The loop isn't implemented, so this prints the usage and fails.
    """
    print_usage("vault")
    logger.error(
        "Service mode is not implemented (%d share(s) configured)", len(store.shares)
    )
    return ExitCode.ERROR

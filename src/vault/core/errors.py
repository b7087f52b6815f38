"""Exit codes and exceptions for vault."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    ERROR = 1
    # Reserved for partial success; nothing returns it yet.
    WARN = 2


class VaultError(Exception):
    """Base class for vault errors."""


class ConfigLoadError(VaultError):
    """The config file exists but could not be read or parsed."""


class ConfigSaveError(VaultError):
    """The config file could not be written."""


class DirectoryError(ConfigSaveError):
    """A path that should be a directory exists as something else."""

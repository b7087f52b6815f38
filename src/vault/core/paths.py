"""Path resolution for vault."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "vault"
CONFIG_FILENAME = "config.json"


class Paths:
    """Resolves the on-disk locations vault uses.

    Layout:
        <user config dir>/
        └── vault/
            └── config.json
    """

    def __init__(self, config_root: Path | None = None) -> None:
        if config_root is None:
            config_root = Path(user_config_dir(roaming=True))
        self.config_root = Path(config_root)

    @property
    def config_dir(self) -> Path:
        return self.config_root / APP_NAME

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME


def default_config_path() -> Path:
    """``<platform config dir>/vault/config.json``."""
    return Paths().config_file

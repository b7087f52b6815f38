"""Config loading and saving for vault."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from vault.core.errors import ConfigLoadError, ConfigSaveError, DirectoryError
from vault.core.paths import default_config_path
from vault.models.config import Config, Share

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> None:
    """Create ``path`` and its parents unless it already exists as a directory.

    Raises:
        DirectoryError: If ``path`` exists but is not a directory, or cannot
            be created.
    """
    try:
        exists = path.exists()
    except OSError as e:
        msg = f"Could not inspect {path}: {e}"
        raise DirectoryError(msg) from e

    if exists:
        if not path.is_dir():
            msg = f"Not a directory: {path}"
            raise DirectoryError(msg)
        return

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        msg = f"Could not create {path}: {e}"
        raise DirectoryError(msg) from e


class ConfigStore:
    """Holds the vault configuration and the file it lives in.

    One store is built per invocation and handed to the command handlers.
    There is no locking: two vault processes writing at the same time will
    race, and the last write wins.
    """

    def __init__(self, path: Path, config: Config | None = None) -> None:
        self.path = Path(path)
        self.config = config if config is not None else Config()

    @classmethod
    def default(cls) -> ConfigStore:
        return cls(default_config_path())

    @property
    def shares(self) -> list[Share]:
        return self.config.shares

    def load(self) -> Config:
        """Load the config file into the store.

        A missing file is the normal first-run state and leaves the store
        with an empty config.

        Raises:
            ConfigLoadError: If the file exists but can't be read, isn't
                valid JSON, or doesn't match the config structure.
        """
        logger.debug("Loading config from %s", self.path)

        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No config file found at %s, using empty config", self.path)
            self.config = Config()
            return self.config
        except OSError as e:
            msg = f"Could not read {self.path}: {e}"
            raise ConfigLoadError(msg) from e
        except UnicodeDecodeError as e:
            msg = f"Config file {self.path} is not valid UTF-8: {e}"
            raise ConfigLoadError(msg) from e

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            msg = f"Invalid JSON in {self.path}: {e}"
            raise ConfigLoadError(msg) from e

        try:
            self.config = Config.model_validate(raw)
        except ValidationError as e:
            msg = f"Config validation failed for {self.path}:\n{e}"
            raise ConfigLoadError(msg) from e

        logger.debug("Loaded %d share(s)", len(self.config.shares))
        return self.config

    def add_share(self, name: str, dir: str) -> Share:
        """Append a share to the in-memory config. Call :meth:`save` to persist."""
        share = self.config.add_share(name, dir)
        logger.debug("Added share %s -> %s", name, dir)
        return share

    def save(self) -> None:
        """Write the whole config to disk, replacing the previous file.

        Raises:
            DirectoryError: If the config directory exists as a non-directory.
            ConfigSaveError: On any other write or serialization failure.
        """
        ensure_dir(self.path.parent)

        try:
            text = json.dumps(self.config.to_json_dict(), indent=4) + "\n"
        except (TypeError, ValueError) as e:
            msg = f"Could not serialize config: {e}"
            raise ConfigSaveError(msg) from e

        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            msg = f"Could not write {self.path}: {e}"
            raise ConfigSaveError(msg) from e

        logger.debug("Saved %d share(s) to %s", len(self.config.shares), self.path)

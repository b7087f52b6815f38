"""Shared test fixtures for vault."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vault.core.config import ConfigStore
from vault.models.config import Config, Share


@pytest.fixture(autouse=True)
def user_config_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the platform config directory at a temp dir for every test."""
    root = tmp_path / "user-config"
    monkeypatch.setattr("vault.core.paths.user_config_dir", lambda **kwargs: str(root))
    return root


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """A config file location whose parent directories don't exist yet."""
    return tmp_path / "settings" / "vault" / "config.json"


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    """An empty config store backed by ``config_path``."""
    return ConfigStore(config_path)


@pytest.fixture
def sample_config() -> Config:
    """A config with two shares."""
    return Config(
        shares=[
            Share(name="docs", dir="/tmp/docs"),
            Share(name="pictures", dir="/tmp/pics"),
        ]
    )


@pytest.fixture
def sample_config_json() -> str:
    """Sample config as it is written on disk."""
    return json.dumps(
        {
            "Shares": [
                {"Name": "docs", "Dir": "/tmp/docs"},
                {"Name": "pictures", "Dir": "/tmp/pics"},
            ]
        },
        indent=4,
    )

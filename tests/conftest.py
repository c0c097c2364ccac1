"""Shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config at a temporary directory."""
    directory = tmp_path / "wtf-config"
    monkeypatch.setenv("WTF_CONFIG_DIR", str(directory))
    return directory

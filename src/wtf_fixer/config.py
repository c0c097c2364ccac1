"""User configuration persisted as JSON in the user's home directory."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from wtf_fixer.corrections.engine import TypoRule

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "WTF_CONFIG_DIR"
KNOWN_KEYS = ("custom_typos", "first_run_complete", "auto_mode")


class ConfigError(Exception):
    """Raised when the configuration cannot be written."""


@dataclass
class UserConfig:
    """Custom typo fixes and preferences."""

    custom_typos: list[tuple[str, str]] = field(default_factory=list)
    first_run_complete: bool = False
    auto_mode: bool = False
    # Keys this version does not use, written back unchanged
    extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @staticmethod
    def config_path() -> Path:
        """Location of the config file."""
        config_dir = os.getenv(CONFIG_DIR_ENV)
        if config_dir:
            return Path(config_dir) / "config.json"
        return Path.home() / ".wtf" / "config.json"

    @classmethod
    def get_config_path_display(cls) -> str:
        try:
            return str(cls.config_path())
        except RuntimeError:
            return "unknown"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserConfig:
        """Build a config from decoded JSON, keeping unknown keys in ``extra``."""
        typos = [
            (str(pair[0]), str(pair[1]))
            for pair in data.get("custom_typos", [])
            if isinstance(pair, (list, tuple)) and len(pair) == 2
        ]
        return cls(
            custom_typos=typos,
            first_run_complete=bool(data.get("first_run_complete", False)),
            auto_mode=bool(data.get("auto_mode", False)),
            extra={k: v for k, v in data.items() if k not in KNOWN_KEYS},
        )

    @classmethod
    def load(cls) -> UserConfig:
        """Load the config, falling back to defaults if missing or invalid."""
        try:
            path = cls.config_path()
        except RuntimeError:
            return cls()

        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config {path}: {e}")
            return cls()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config {path}: expected a JSON object")
            return cls()

        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "custom_typos": [list(pair) for pair in self.custom_typos],
            "first_run_complete": self.first_run_complete,
            "auto_mode": self.auto_mode,
        }

    def save(self) -> None:
        """Write the config to disk.

        Raises:
            ConfigError: If the directory or file cannot be written
        """
        try:
            path = self.config_path()
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        except (OSError, RuntimeError) as e:
            raise ConfigError(f"Failed to write config: {e}") from e

        logger.debug(f"Saved config to {path}")

    @property
    def overrides(self) -> list[TypoRule]:
        """Custom typos as rules for the correction engine."""
        return [TypoRule(wrong, correct) for wrong, correct in self.custom_typos]

    def add_typo(self, wrong: str, correct: str) -> None:
        """Add a typo fix, replacing any existing entry for ``wrong``."""
        self.custom_typos = [(w, c) for w, c in self.custom_typos if w != wrong]
        self.custom_typos.append((wrong, correct))

    def remove_typo(self, wrong: str) -> bool:
        """Remove a typo fix. Returns True if something was removed."""
        original_len = len(self.custom_typos)
        self.custom_typos = [(w, c) for w, c in self.custom_typos if w != wrong]
        return len(self.custom_typos) < original_len

    def clear_typos(self) -> int:
        count = len(self.custom_typos)
        self.custom_typos.clear()
        return count

    def mark_first_run_complete(self) -> None:
        self.first_run_complete = True

    def set_auto_mode(self, enabled: bool) -> None:
        self.auto_mode = enabled

    def toggle_auto_mode(self) -> bool:
        self.auto_mode = not self.auto_mode
        return self.auto_mode

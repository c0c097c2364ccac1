"""Tests for the package-level API."""

import pytest

import wtf_fixer
from wtf_fixer.config import UserConfig
from wtf_fixer.corrections.engine import Correction, find_corrections
from wtf_fixer.history.locator import get_last_command


class TestPublicApi:
    """Test lazy exports from the top-level package."""

    def test_exports(self) -> None:
        """Test that each exported name resolves to its implementation."""
        assert wtf_fixer.find_corrections is find_corrections
        assert wtf_fixer.Correction is Correction
        assert wtf_fixer.get_last_command is get_last_command
        assert wtf_fixer.UserConfig is UserConfig
        assert set(wtf_fixer.__all__) == {"find_corrections", "Correction", "get_last_command", "UserConfig"}

    def test_usable_from_package(self) -> None:
        """Test a correction through the top-level name."""
        corrections = wtf_fixer.find_corrections("sl")

        assert corrections == [wtf_fixer.Correction("ls", "reversed command", 1.0)]

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError):
            wtf_fixer.does_not_exist

"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from lookslike.lib.settings import LookslikeSettings


class TestLookslikeSettings:
    """Tests for LookslikeSettings."""

    def test_defaults(self, monkeypatch, tmp_path):
        """Defaults apply without environment variables."""
        monkeypatch.chdir(tmp_path)
        for var in ("LOOKSLIKE_LOG_LEVEL", "LOOKSLIKE_LOG_FORMAT", "LOOKSLIKE_LOG_FILE"):
            monkeypatch.delenv(var, raising=False)
        settings = LookslikeSettings()
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.log_file is None

    def test_environment_overrides(self, monkeypatch):
        """LOOKSLIKE_ variables override defaults and are normalized."""
        monkeypatch.setenv("LOOKSLIKE_LOG_LEVEL", "debug")
        monkeypatch.setenv("LOOKSLIKE_LOG_FORMAT", "JSON")
        settings = LookslikeSettings()
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_dotenv_file(self, monkeypatch, tmp_path):
        """Values are read from a .env file in the working directory."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("LOOKSLIKE_LOG_FILE", raising=False)
        (tmp_path / ".env").write_text("LOOKSLIKE_LOG_FILE=run.log\n", encoding="utf-8")
        assert LookslikeSettings().log_file == "run.log"

    def test_invalid_level(self):
        """Unknown levels are rejected."""
        with pytest.raises(ValidationError, match="log_level"):
            LookslikeSettings(log_level="LOUD")

    def test_invalid_format(self):
        """Unknown formats are rejected."""
        with pytest.raises(ValidationError, match="log_format"):
            LookslikeSettings(log_format="xml")

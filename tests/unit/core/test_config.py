"""
Unit tests for contextforge.core.config.Settings.
"""

import pytest
from pydantic import ValidationError

from contextforge.core.config import DEFAULT_ADDRESS, DEFAULT_USER_AGENT, Settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no CONTEXTFORGE_ variables and no .env file."""
    for name in ("CONTEXTFORGE_ADDR", "CONTEXTFORGE_TOKEN", "CONTEXTFORGE_USER_AGENT", "CONTEXTFORGE_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.mark.unit
class TestSettings:
    """Tests for environment-driven client settings."""

    def test_defaults(self, clean_env):
        settings = Settings()
        assert settings.addr == DEFAULT_ADDRESS
        assert settings.token == ""
        assert settings.user_agent == DEFAULT_USER_AGENT
        assert settings.timeout_seconds is None

    def test_environment_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("CONTEXTFORGE_ADDR", "https://cf.example.com/api")
        monkeypatch.setenv("CONTEXTFORGE_TOKEN", "secret")
        monkeypatch.setenv("CONTEXTFORGE_TIMEOUT_SECONDS", "2.5")
        settings = Settings()
        assert settings.addr == "https://cf.example.com/api/"
        assert settings.token == "secret"
        assert settings.timeout_seconds == 2.5

    def test_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("CONTEXTFORGE_TOKEN=from-file\nUNRELATED=1\n")
        assert Settings().token == "from-file"

    def test_non_positive_timeout_rejected(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(timeout_seconds=0)

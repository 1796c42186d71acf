"""
Tests for environment-driven settings.
"""

import importlib

import pytest

from vidscrape.core import config


@pytest.fixture
def reload_settings(monkeypatch):
    """Reload the config module after patching the environment."""
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config).settings

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, reload_settings, monkeypatch):
        for key in ("SCRAPE_SERVICE_URL", "SCRAPE_SERVICE_TIMEOUT", "LOG_LEVEL", "CORS_ALLOW_ORIGINS"):
            monkeypatch.delenv(key, raising=False)

        settings = reload_settings()

        assert settings.scrape_service_url == "http://localhost:5000/scrape"
        assert settings.scrape_service_timeout is None
        assert settings.log_level == "INFO"
        assert settings.cors_allow_origins == ["*"]

    def test_environment_overrides(self, reload_settings):
        settings = reload_settings(
            SCRAPE_SERVICE_URL="https://scraper.internal/scrape",
            SCRAPE_SERVICE_TIMEOUT="7.5",
            LOG_LEVEL="debug",
            CORS_ALLOW_ORIGINS="http://a.test, http://b.test",
            DEBUG="true",
        )

        assert settings.scrape_service_url == "https://scraper.internal/scrape"
        assert settings.scrape_service_timeout == 7.5
        assert settings.log_level == "DEBUG"
        assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]
        assert settings.debug is True

    def test_blank_timeout_means_none(self, reload_settings):
        settings = reload_settings(SCRAPE_SERVICE_TIMEOUT="  ")
        assert settings.scrape_service_timeout is None

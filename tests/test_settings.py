"""Tests for environment-driven settings."""

from __future__ import annotations

import httpx

from mvn_search.settings import DEFAULT_BASE_URL, Settings


class TestSettingsFromEnv:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MVN_SEARCH_BASE_URL", raising=False)
        monkeypatch.delenv("MVN_SEARCH_LOG_LEVEL", raising=False)

        settings = Settings.from_env()

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.log_level == "WARNING"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("MVN_SEARCH_BASE_URL", "  http://localhost:8983/ ")
        monkeypatch.setenv("MVN_SEARCH_LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.base_url == "http://localhost:8983"
        assert settings.log_level == "DEBUG"

    def test_blank_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("MVN_SEARCH_BASE_URL", "   ")
        assert Settings.from_env().base_url == DEFAULT_BASE_URL


class TestHttpClient:
    def test_timeout(self):
        timeout = Settings().http_timeout()
        assert isinstance(timeout, httpx.Timeout)
        assert timeout.connect == 10.0
        assert timeout.read == 30.0

    async def test_client_is_configured(self):
        async with Settings().http_client() as client:
            assert client.timeout.connect == 10.0
            assert client.follow_redirects is True

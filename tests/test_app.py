"""Tests for configuration and cross-cutting middleware."""

import pytest

from core.config import Settings, get_settings
from core.exceptions import ConfigurationError
from core.logging import _parse_size


@pytest.fixture
def fresh_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_missing_token_is_fatal(self, monkeypatch, fresh_settings_cache):
        monkeypatch.delenv("TREFLE_API_TOKEN", raising=False)

        with pytest.raises(ConfigurationError, match="Missing TREFLE_API_TOKEN"):
            get_settings()

    def test_blank_token_is_fatal(self, monkeypatch, fresh_settings_cache):
        monkeypatch.setenv("TREFLE_API_TOKEN", "   ")

        with pytest.raises(ConfigurationError, match="Missing TREFLE_API_TOKEN"):
            get_settings()

    def test_reads_environment(self, monkeypatch, fresh_settings_cache):
        monkeypatch.setenv("TREFLE_API_TOKEN", "env-token")
        monkeypatch.setenv("PORT", "8080")

        settings = get_settings()

        assert settings.trefle_api_token == "env-token"
        assert settings.port == 8080

    def test_defaults(self):
        settings = Settings(trefle_api_token="t", trefle_api_url="https://trefle.io/api/v1")

        assert settings.port == 5000
        assert settings.cors_origins_list == ["*"]
        assert settings.cors_allow_methods_list == ["GET", "OPTIONS"]

    def test_trailing_slash_stripped(self):
        settings = Settings(trefle_api_token="t", trefle_api_url="https://trefle.io/api/v1/")

        assert settings.trefle_api_url == "https://trefle.io/api/v1"

    def test_invalid_environment(self, monkeypatch, fresh_settings_cache):
        monkeypatch.setenv("ENVIRONMENT", "moon")

        with pytest.raises(ConfigurationError, match="environment"):
            get_settings()

    def test_parse_size(self):
        assert _parse_size("10MB") == 10 * 1024 * 1024
        assert _parse_size("2kb") == 2048
        assert _parse_size("512") == 512


class TestMiddleware:

    @pytest.mark.asyncio
    async def test_correlation_id_echoed(self, test_client):
        response = await test_client.get("/health", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"

    @pytest.mark.asyncio
    async def test_correlation_id_generated(self, test_client):
        response = await test_client.get("/health")

        assert response.headers["X-Correlation-ID"]
        assert "X-Process-Time" in response.headers

    @pytest.mark.asyncio
    async def test_cors_allows_any_origin(self, test_client):
        response = await test_client.get("/health", headers={"Origin": "http://example.com"})

        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_metrics_exposed(self, test_client):
        await test_client.get("/health")

        response = await test_client.get("/metrics/")

        assert response.status_code == 200
        assert "http_requests_total" in response.text
        assert "external_service_requests_total" in response.text

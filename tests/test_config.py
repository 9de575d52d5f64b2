"""Tests for settings and per-request n8n credential resolution."""

import pytest
from pydantic import ValidationError

from n8n_mcp.config import (
    N8nConfig,
    Settings,
    get_settings,
    resolve_n8n_config,
    resolve_n8n_credentials,
    sanitize_api_url,
)


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestResolveN8nConfig:
    """Headers first, environment second, both values required."""

    def test_headers_take_priority(self):
        settings = _settings(n8n_api_url="https://env.example.com", n8n_api_key="env-key")
        headers = {
            "X-N8N-API-URL": "https://header.example.com/api/v1",
            "X-N8N-API-KEY": "header-key",
        }

        config = resolve_n8n_config(headers, settings)

        assert config.api_url == "https://header.example.com/api/v1"
        assert config.api_key == "header-key"

    def test_lowercase_header_names(self):
        headers = {"x-n8n-api-url": "https://h.example.com", "x-n8n-api-key": "k"}

        config = resolve_n8n_config(headers, _settings())

        assert config == N8nConfig(api_url="https://h.example.com", api_key="k")

    def test_falls_back_to_settings(self):
        settings = _settings(n8n_api_url="https://env.example.com", n8n_api_key="env-key")

        config = resolve_n8n_config(None, settings)

        assert config.api_url == "https://env.example.com"
        assert config.api_key == "env-key"

    def test_values_resolve_independently(self):
        settings = _settings(n8n_api_url="https://env.example.com", n8n_api_key="env-key")

        config = resolve_n8n_config({"X-N8N-API-URL": "https://other.example.com"}, settings)

        assert config.api_url == "https://other.example.com"
        assert config.api_key == "env-key"

    def test_timeout_comes_from_settings(self):
        settings = _settings(
            n8n_api_url="https://env.example.com",
            n8n_api_key="env-key",
            n8n_request_timeout=5.0,
        )

        assert resolve_n8n_config({}, settings).timeout == 5.0

    @pytest.mark.parametrize(
        "headers,url,key",
        [
            ({}, None, None),
            ({"X-N8N-API-URL": "https://h.example.com"}, None, None),
            ({"X-N8N-API-KEY": "k"}, None, None),
            ({}, "https://env.example.com", None),
            ({"X-N8N-API-URL": ""}, None, "env-key"),
        ],
    )
    def test_missing_value_returns_none(self, headers, url, key):
        settings = _settings(n8n_api_url=url, n8n_api_key=key)

        assert resolve_n8n_config(headers, settings) is None

    def test_credentials_tuple(self):
        url, key = resolve_n8n_credentials({"X-N8N-API-URL": "https://h.example.com"}, _settings())

        assert url == "https://h.example.com"
        assert key is None


class TestSettings:
    def test_reads_environment(self, n8n_env):
        settings = get_settings()

        assert settings.n8n_api_url == "https://n8n.example.com/api/v1"
        assert settings.n8n_api_key == "env-api-key"

    def test_unconfigured_by_default(self):
        settings = get_settings()

        assert settings.n8n_api_url is None
        assert settings.n8n_api_key is None
        assert settings.n8n_request_timeout == 30.0
        assert settings.log_level == "INFO"

    def test_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert get_settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError, match="log_level"):
            _settings(log_level="verbose")


class TestSanitizeApiUrl:
    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://n8n.example.com/api/v1", "https://n8n.example.com"),
            ("https://n8n.example.com/api/v1/", "https://n8n.example.com"),
            ("https://n8n.example.com", "https://n8n.example.com"),
            ("https://n8n.example.com/api/v1/extra", "https://n8n.example.com/api/v1/extra"),
            (None, None),
            ("", None),
        ],
    )
    def test_sanitize(self, url, expected):
        assert sanitize_api_url(url) == expected


def test_config_repr_hides_api_key():
    config = N8nConfig(api_url="https://n8n.example.com", api_key="super-secret")

    assert "super-secret" not in repr(config)

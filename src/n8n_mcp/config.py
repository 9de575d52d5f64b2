"""Configuration and environment loading for the n8n MCP server."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

API_URL_HEADER = "X-N8N-API-URL"
API_KEY_HEADER = "X-N8N-API-KEY"

NOT_CONFIGURED_MESSAGE = (
    "n8n API not configured. Provide X-N8N-API-URL and X-N8N-API-KEY headers, "
    "or set environment variables."
)

_API_SUFFIX = re.compile(r"/api/v1/?$")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # n8n defaults, used when a request does not carry the X-N8N-* headers
    n8n_api_url: str | None = None
    n8n_api_key: str | None = None
    n8n_request_timeout: float = 30.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@dataclass(frozen=True)
class N8nConfig:
    """Credentials for one n8n instance, resolved per request.

    Attributes:
        api_url: Base URL of the n8n public API (e.g. https://host/api/v1).
        api_key: Value sent in the X-N8N-API-KEY header.
        timeout: httpx timeout in seconds for each round trip.
    """

    api_url: str
    api_key: str
    timeout: float = 30.0

    def __repr__(self) -> str:
        return f"N8nConfig(api_url={self.api_url!r}, api_key='***')"


def resolve_n8n_credentials(
    headers: Mapping[str, str] | None,
    settings: Settings,
) -> tuple[str | None, str | None]:
    """Resolve the n8n API URL and key, headers first, then settings.

    Each value is resolved independently, so a request may override only the
    URL and still use the key from the environment.

    Returns:
        (api_url, api_key); either may be None
    """
    headers = headers or {}
    api_url = _header(headers, API_URL_HEADER) or settings.n8n_api_url
    api_key = _header(headers, API_KEY_HEADER) or settings.n8n_api_key
    return api_url or None, api_key or None


def resolve_n8n_config(
    headers: Mapping[str, str] | None,
    settings: Settings,
) -> N8nConfig | None:
    """Build the per-request N8nConfig.

    Args:
        headers: Incoming request headers (case-insensitive mapping), or None
        settings: Application settings holding the environment defaults

    Returns:
        N8nConfig when both URL and key are available, None otherwise
    """
    api_url, api_key = resolve_n8n_credentials(headers, settings)
    if not api_url or not api_key:
        return None

    return N8nConfig(
        api_url=api_url,
        api_key=api_key,
        timeout=settings.n8n_request_timeout,
    )


def sanitize_api_url(api_url: str | None) -> str | None:
    """Strip the /api/v1 suffix so the URL can be shown without API details."""
    if not api_url:
        return None
    return _API_SUFFIX.sub("", api_url)


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    return value or None

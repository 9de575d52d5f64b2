"""Global test configuration for the n8n MCP server."""

import os
from unittest.mock import AsyncMock, patch

import pytest

from n8n_mcp.config import get_settings

_N8N_ENV_VARS = ("N8N_API_URL", "N8N_API_KEY")


@pytest.fixture(autouse=True, scope="session")
def _isolate_n8n_env():
    """Remove real n8n credentials from the environment for the test run.

    Tests that need environment defaults opt in with the ``n8n_env``
    fixture; everything else sees an unconfigured server.
    """
    originals = {key: os.environ.pop(key, None) for key in _N8N_ENV_VARS}
    get_settings.cache_clear()

    yield

    for key, original in originals.items():
        if original is not None:
            os.environ[key] = original
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Clear the lru_cache on get_settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def n8n_env(monkeypatch):
    """Provide n8n credentials through environment variables."""
    monkeypatch.setenv("N8N_API_URL", "https://n8n.example.com/api/v1")
    monkeypatch.setenv("N8N_API_KEY", "env-api-key")
    get_settings.cache_clear()
    yield


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient; configure ``mock_http.request`` per test."""
    with patch("httpx.AsyncClient") as mock_client_cls:
        mock_client = AsyncMock()
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)
        mock_client_cls.return_value = mock_client
        yield mock_client


@pytest.fixture
def sample_workflow() -> dict:
    """A workflow as n8n returns it from GET /workflows/{id}."""
    return {
        "id": "wf-1",
        "name": "Daily report",
        "active": False,
        "nodes": [
            {
                "id": "node-1",
                "name": "Schedule",
                "type": "n8n-nodes-base.scheduleTrigger",
                "typeVersion": 1.2,
                "position": [0, 0],
                "parameters": {"rule": {"interval": [{"field": "days"}]}},
            },
            {
                "id": "node-2",
                "name": "Fetch",
                "type": "n8n-nodes-base.httpRequest",
                "typeVersion": 4,
                "position": [220, 0],
                "parameters": {"url": "https://example.com/report"},
            },
        ],
        "connections": {
            "Schedule": {
                "main": [[{"node": "Fetch", "type": "main", "index": 0}]],
            },
        },
        "settings": {"executionOrder": "v1"},
        "staticData": None,
        "tags": [{"id": "tag-1", "name": "reports"}],
        "createdAt": "2026-01-05T10:00:00.000Z",
        "updatedAt": "2026-01-06T10:00:00.000Z",
    }

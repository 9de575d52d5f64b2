"""FastAPI routes for server info and health."""

import logging

from fastapi import APIRouter, Request

from n8n_mcp import __version__
from n8n_mcp.config import get_settings, resolve_n8n_credentials, sanitize_api_url
from n8n_mcp.models.health import N8nConnectionInfo, ServerHealth
from n8n_mcp.tools.workflows import WORKFLOW_TOOLS

logger = logging.getLogger(__name__)

router = APIRouter()

DESCRIPTION = "MCP server for n8n workflow management"


@router.get("/")
async def info() -> dict:
    """Server info: name, version, endpoints and available tools."""
    return {
        "name": "n8n-mcp-server",
        "version": __version__,
        "description": DESCRIPTION,
        "endpoints": {
            "mcp": "/mcp",
            "health": "/health",
        },
        "tools": [tool.name for tool in WORKFLOW_TOOLS],
    }


@router.get("/health", response_model=ServerHealth)
async def health(request: Request) -> ServerHealth:
    """Health check endpoint.

    Reports whether n8n credentials are available for this request. The n8n
    URL is shown without its /api/v1 suffix; the API key is never returned.
    """
    api_url, api_key = resolve_n8n_credentials(request.headers, get_settings())
    configured = bool(api_url and api_key)

    return ServerHealth(
        status="ok" if configured else "unconfigured",
        n8n=N8nConnectionInfo(
            configured=configured,
            url=sanitize_api_url(api_url),
        ),
    )

"""MCP server wiring for the workflow tools.

Binds a ToolRegistry to a low-level ``mcp.server.Server``. n8n credentials
are resolved on every tool call from the HTTP request that carried it, falling
back to the environment, so one server instance can serve callers that point
at different n8n instances.
"""

import logging
from collections.abc import Mapping
from typing import Any

from mcp import types
from mcp.server import Server

from n8n_mcp import __version__
from n8n_mcp.config import NOT_CONFIGURED_MESSAGE, get_settings, resolve_n8n_config
from n8n_mcp.exceptions import ConfigurationError, N8nMcpError
from n8n_mcp.n8n.client import N8nClient
from n8n_mcp.tools.registry import ToolRegistry
from n8n_mcp.tools.workflows import build_registry

logger = logging.getLogger(__name__)

SERVER_NAME = "n8n-mcp-server"


def create_mcp_server(registry: ToolRegistry | None = None) -> Server:
    """Create the MCP server and register the tool handlers.

    Args:
        registry: Tools to expose; defaults to all workflow tools

    Returns:
        Configured MCP Server instance
    """
    registry = registry or build_registry()
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return registry.mcp_tools()

    # Arguments are validated by the registry so errors name the bad fields.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        config = resolve_n8n_config(_request_headers(server), get_settings())
        if config is None:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

        try:
            text = await registry.invoke(name, arguments, N8nClient(config))
        except N8nMcpError as e:
            logger.warning(f"Tool {name} failed: {e}")
            raise

        return [types.TextContent(type="text", text=text)]

    return server


def _request_headers(server: Server) -> Mapping[str, str] | None:
    """Headers of the HTTP request behind the current MCP message, if any."""
    try:
        request = server.request_context.request
    except LookupError:
        return None
    return getattr(request, "headers", None)

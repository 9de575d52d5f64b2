"""HTTP surface: info/health routes and the MCP endpoint."""

from n8n_mcp.api.mcp_endpoint import McpEndpoint, not_configured_response
from n8n_mcp.api.routes import router

__all__ = ["McpEndpoint", "not_configured_response", "router"]

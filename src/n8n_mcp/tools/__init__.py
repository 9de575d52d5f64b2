"""MCP tool layer: definitions, registry and server wiring."""

from n8n_mcp.tools.base import ToolDefinition, format_result
from n8n_mcp.tools.registry import ToolRegistry
from n8n_mcp.tools.server import create_mcp_server
from n8n_mcp.tools.workflows import WORKFLOW_TOOLS, build_registry

__all__ = [
    "WORKFLOW_TOOLS",
    "ToolDefinition",
    "ToolRegistry",
    "build_registry",
    "create_mcp_server",
    "format_result",
]

"""n8n MCP Server - n8n workflow management over the Model Context Protocol."""

__version__ = "0.1.0"

from n8n_mcp.exceptions import (
    ConfigurationError,
    N8nApiError,
    N8nMcpError,
    ToolValidationError,
    UnknownToolError,
)

__all__ = [
    "__version__",
    "ConfigurationError",
    "N8nApiError",
    "N8nMcpError",
    "ToolValidationError",
    "UnknownToolError",
]

"""Custom exceptions for the n8n MCP server."""

from typing import Any


class N8nMcpError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(N8nMcpError):
    """Raised when the n8n API URL or API key is not available."""


class N8nApiError(N8nMcpError):
    """Raised when the n8n API returns an error or cannot be reached.

    Transport failures, authentication failures and service-reported errors
    all end up here with a single human-readable message.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class UnknownToolError(N8nMcpError):
    """Raised when a tool name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolValidationError(N8nMcpError):
    """Raised when tool arguments do not match the tool's input model."""

    def __init__(self, tool: str, errors: list[dict[str, Any]]) -> None:
        self.tool = tool
        self.errors = errors
        self.fields = [_format_loc(error.get("loc", ())) for error in errors]
        details = "; ".join(
            f"{field}: {error.get('msg', 'invalid value')}"
            for field, error in zip(self.fields, errors)
        )
        super().__init__(f"Invalid arguments for {tool}: {details}")


def _format_loc(loc: tuple) -> str:
    """Render a pydantic error location as a dotted path (nodes.0.position)."""
    return ".".join(str(part) for part in loc) or "(root)"

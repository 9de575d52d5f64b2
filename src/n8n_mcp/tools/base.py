"""Tool definition and response formatting for the MCP tool layer."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mcp import types
from pydantic import BaseModel

if TYPE_CHECKING:
    from n8n_mcp.n8n.client import N8nClient

ToolHandler = Callable[["N8nClient", Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """Immutable descriptor of one callable tool.

    Attributes:
        name: Stable tool name exposed to MCP clients (e.g. "get_workflow").
        description: Human-readable summary shown to the agent.
        input_model: Pydantic model that arguments are validated against.
        handler: Coroutine taking (client, validated input) and returning a
            JSON-serializable result.
    """

    name: str
    description: str
    input_model: type[BaseModel]
    handler: ToolHandler

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool's arguments, using wire (camelCase) names."""
        return self.input_model.model_json_schema(by_alias=True)

    def to_mcp_tool(self) -> types.Tool:
        """Describe this tool for an MCP tools/list response."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )


def format_result(result: Any) -> str:
    """Render a tool result as the pretty-printed JSON text payload."""
    if isinstance(result, BaseModel):
        result = result.model_dump(by_alias=True, mode="json")
    return json.dumps(result, indent=2, default=str)

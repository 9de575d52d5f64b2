"""Tool registry: name lookup, argument validation and dispatch."""

import logging
from typing import Any

from mcp import types
from pydantic import ValidationError

from n8n_mcp.exceptions import ToolValidationError, UnknownToolError
from n8n_mcp.n8n.client import N8nClient
from n8n_mcp.tools.base import ToolDefinition, format_result

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Central registry mapping tool names to their definitions."""

    def __init__(self) -> None:
        self._by_name: dict[str, ToolDefinition] = {}

    def register(self, tool: ToolDefinition) -> None:
        """Register a tool definition."""
        if tool.name in self._by_name:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._by_name[tool.name] = tool

    def get_by_name(self, name: str) -> ToolDefinition | None:
        return self._by_name.get(name)

    def get_all(self) -> list[ToolDefinition]:
        return list(self._by_name.values())

    def names(self) -> list[str]:
        return list(self._by_name)

    def mcp_tools(self) -> list[types.Tool]:
        """MCP descriptors for every registered tool, in registration order."""
        return [tool.to_mcp_tool() for tool in self._by_name.values()]

    def validate(self, name: str, arguments: dict[str, Any] | None) -> Any:
        """Validate raw arguments against the tool's input model.

        Raises:
            UnknownToolError: If no tool is registered under ``name``
            ToolValidationError: If a required field is missing or a value
                has the wrong shape
        """
        tool = self._by_name.get(name)
        if tool is None:
            raise UnknownToolError(name)

        try:
            return tool.input_model.model_validate(arguments or {})
        except ValidationError as e:
            raise ToolValidationError(name, e.errors(include_url=False)) from e

    async def invoke(
        self,
        name: str,
        arguments: dict[str, Any] | None,
        client: N8nClient,
    ) -> str:
        """Validate arguments, run the tool and format its result.

        Validation happens before the handler runs, so invalid calls never
        reach the n8n API.

        Args:
            name: Tool name
            arguments: Untyped arguments from the MCP client
            client: n8n client bound to this request's credentials

        Returns:
            Pretty-printed JSON text of the tool result
        """
        payload = self.validate(name, arguments)
        logger.info(f"Tool called: {name}")
        result = await self._by_name[name].handler(client, payload)
        return format_result(result)

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

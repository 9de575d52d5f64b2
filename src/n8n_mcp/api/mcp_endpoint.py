"""ASGI endpoint serving the MCP protocol at /mcp."""

import logging

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import Receive, Scope, Send

from n8n_mcp.config import NOT_CONFIGURED_MESSAGE, get_settings, resolve_n8n_config

logger = logging.getLogger(__name__)

# JSON-RPC "internal error"
NOT_CONFIGURED_CODE = -32603


def not_configured_response() -> JSONResponse:
    """JSON-RPC error returned when no n8n credentials are available."""
    return JSONResponse(
        {
            "jsonrpc": "2.0",
            "error": {
                "code": NOT_CONFIGURED_CODE,
                "message": NOT_CONFIGURED_MESSAGE,
            },
            "id": None,
        },
        status_code=500,
    )


class McpEndpoint:
    """Checks n8n configuration, then hands the request to the MCP SDK.

    Requests without credentials (neither X-N8N-* headers nor environment
    defaults) are rejected here, before any MCP session or n8n call exists.
    """

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self._session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        if resolve_n8n_config(request.headers, get_settings()) is None:
            logger.warning("Rejected MCP request: n8n API not configured")
            await not_configured_response()(scope, receive, send)
            return

        await self._session_manager.handle_request(scope, receive, send)

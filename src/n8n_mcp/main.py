"""FastAPI application entry point for the n8n MCP server."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from n8n_mcp import __version__
from n8n_mcp.api.mcp_endpoint import McpEndpoint
from n8n_mcp.api.routes import DESCRIPTION, router
from n8n_mcp.config import get_settings
from n8n_mcp.tools.server import create_mcp_server

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    # Stateless: every POST carries its own credentials and gets its own
    # short-lived MCP session.
    session_manager = StreamableHTTPSessionManager(
        app=create_mcp_server(),
        json_response=True,
        stateless=True,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info(f"Starting n8n MCP Server v{__version__}")
        if settings.n8n_api_url and settings.n8n_api_key:
            logger.info("Default n8n credentials loaded from environment")
        else:
            logger.info(
                "No default n8n credentials; requests must send "
                "X-N8N-API-URL and X-N8N-API-KEY headers"
            )

        async with session_manager.run():
            yield

        logger.info("Shutting down n8n MCP Server")

    app = FastAPI(
        title="n8n MCP Server",
        description=DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # CORS middleware for browser-based MCP clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Mcp-Session-Id"],
    )

    app.include_router(router)
    app.add_route(
        "/mcp",
        McpEndpoint(session_manager),
        methods=["GET", "POST", "DELETE"],
        include_in_schema=False,
    )

    return app


# Create app instance for uvicorn
app = create_app()


def run() -> None:
    """Run the server with uvicorn (the ``n8n-mcp`` console script)."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "n8n_mcp.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()

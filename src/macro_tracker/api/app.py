"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.types import Receive, Scope, Send

from macro_tracker.api.mcp_server import create_mcp_server
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer


class StreamableHTTPEndpoint:
    """ASGI endpoint handing requests to the MCP session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self.session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app serving the MCP endpoint."""
    configure_logging()
    logger = logging.getLogger(__name__)
    session_manager = StreamableHTTPSessionManager(
        app=create_mcp_server(container.tools),
        json_response=True,
        stateless=True,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            async with session_manager.run():
                logger.info("MCP endpoint ready at /mcp")
                yield
        finally:
            await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    app.add_route(
        "/mcp",
        StreamableHTTPEndpoint(session_manager),
        methods=["GET", "POST", "DELETE"],
        include_in_schema=False,
    )
    return app

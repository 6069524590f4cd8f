"""MCP server exposing the macro tracker tools."""

from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from macro_tracker.api.tools import MacroTools

SERVER_NAME = "macro-tracker-mcp-server"
SERVER_VERSION = "1.0.0"


class ToolCallError(Exception):
    """Raised to report a failed tool outcome as an MCP error result."""


def create_mcp_server(tools: MacroTools) -> Server:
    """Create a low-level MCP server bound to the given tools."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tools.list_tools()

    @server.call_tool()
    async def call_tool(
        name: str, arguments: dict[str, Any]
    ) -> tuple[list[types.TextContent], dict[str, Any]]:
        outcome = await tools.call(name, arguments)
        if outcome.is_error:
            raise ToolCallError(outcome.text)
        return [types.TextContent(type="text", text=outcome.text)], dict(
            outcome.structured or {}
        )

    return server


async def run_stdio(tools: MacroTools) -> None:
    """Serve the tools over stdin/stdout until the stream closes."""
    server = create_mcp_server(tools)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )

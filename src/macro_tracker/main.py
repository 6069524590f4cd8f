"""Command-line entrypoint selecting the MCP transport."""

import asyncio
import logging

import uvicorn
from pydantic import ValidationError

from macro_tracker.api.app import create_app
from macro_tracker.api.mcp_server import run_stdio
from macro_tracker.app_logging import configure_logging
from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer, build_container

_logger = logging.getLogger(__name__)


def main() -> None:
    """Start the server on the configured transport."""
    configure_logging()
    try:
        settings = Settings()
    except ValidationError as exc:
        _logger.error(  # noqa: TRY400
            "Invalid configuration (is GITHUB_TOKEN set?): %s", exc
        )
        raise SystemExit(1) from exc
    container = build_container(settings)
    _logger.info("Repository: %s", settings.repository)
    _logger.info("File: %s", settings.github_file_path)
    if settings.transport == "stdio":
        _logger.info("Macro Tracker MCP server running on stdio")
        asyncio.run(_serve_stdio(container))
        return
    _logger.info(
        "Macro Tracker MCP server running on http://%s:%s/mcp",
        settings.host,
        settings.port,
    )
    uvicorn.run(create_app(container), host=settings.host, port=settings.port)


async def _serve_stdio(container: AppContainer) -> None:
    try:
        await run_stdio(container.tools)
    finally:
        await container.close_resources()


if __name__ == "__main__":
    main()

"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from macro_tracker.adapters.github_contents_client import (
    ContentsClient,
    HttpxGitHubContentsClient,
)
from macro_tracker.api.tools import MacroTools
from macro_tracker.config import Settings
from macro_tracker.services.documents import DocumentService
from macro_tracker.services.macro_log import MacroLogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    contents_client: ContentsClient
    document_service: DocumentService
    macro_log_service: MacroLogService
    tools: MacroTools
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    contents_client = HttpxGitHubContentsClient.create(
        token=resolved_settings.github_token,
        owner=resolved_settings.github_repo_owner,
        repo=resolved_settings.github_repo_name,
        path=resolved_settings.github_file_path,
        branch=resolved_settings.github_branch,
        api_url=resolved_settings.github_api_url,
        timeout_seconds=resolved_settings.github_timeout_seconds,
    )
    document_service = DocumentService(
        client=contents_client,
        refresh_sha_before_commit=resolved_settings.refresh_sha_before_commit,
    )
    macro_log_service = MacroLogService(document_service)

    async def close_resources() -> None:
        await contents_client.close()

    return AppContainer(
        settings=resolved_settings,
        contents_client=contents_client,
        document_service=document_service,
        macro_log_service=macro_log_service,
        tools=MacroTools(macro_log_service),
        close_resources=close_resources,
    )

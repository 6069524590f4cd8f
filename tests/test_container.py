"""Tests for container wiring."""

import asyncio

from macro_tracker.adapters.github_contents_client import HttpxGitHubContentsClient
from macro_tracker.config import Settings
from macro_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.tools.macro_log is container.macro_log_service
    assert container.macro_log_service.documents is container.document_service
    client = container.contents_client
    assert isinstance(client, HttpxGitHubContentsClient)
    assert client.contents_url == (
        "https://api.github.com/repos/PeterBowles/Macro_Tracker/contents/data.json"
    )
    assert client.token == "test-token"
    asyncio.run(container.close_resources())


def test_build_container_passes_commit_mode() -> None:
    settings = Settings(github_token="token", refresh_sha_before_commit=True)

    container = build_container(settings)

    assert container.document_service.refresh_sha_before_commit is True
    asyncio.run(container.close_resources())

"""Shared test fixtures."""

import base64
import copy
import json
from dataclasses import dataclass, field

import pytest

from macro_tracker.adapters.github_contents_client import ContentsClient
from macro_tracker.api.tools import MacroTools
from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer
from macro_tracker.domain.errors import RemoteConflictError
from macro_tracker.services.documents import DocumentService
from macro_tracker.services.macro_log import MacroLogService


def sample_document() -> dict[str, object]:
    return {
        "goals": {"calories": 2000, "protein": 150},
        "log": [
            {
                "date": "2025-01-02",
                "entries": [
                    {
                        "time": "08:00",
                        "description": "Eggs",
                        "calories": 200,
                        "protein": 12,
                    },
                    {
                        "time": "12:30",
                        "description": "Chicken salad",
                        "calories": 450,
                        "protein": 40.5,
                    },
                ],
            },
            {
                "date": "2025-01-01",
                "entries": [
                    {
                        "time": "19:00",
                        "description": "Pasta",
                        "calories": 700,
                        "protein": 25,
                    }
                ],
            },
        ],
    }


def encode_json(document: dict[str, object]) -> str:
    return base64.b64encode(json.dumps(document, indent=2).encode()).decode()


@dataclass
class InMemoryContentsClient(ContentsClient):
    """In-memory contents store with sha-guarded writes."""

    document: dict[str, object] = field(default_factory=sample_document)
    version: int = 1
    commits: list[str] = field(default_factory=list)
    written_texts: list[str] = field(default_factory=list)
    reads: int = 0
    pending_external_edit: dict[str, object] | None = None

    @property
    def sha(self) -> str:
        return f"sha-{self.version}"

    async def get_file(self) -> dict[str, object]:
        self.reads += 1
        payload = {
            "sha": self.sha,
            "content": encode_json(self.document),
            "encoding": "base64",
        }
        if self.pending_external_edit is not None:
            self.document = self.pending_external_edit
            self.version += 1
            self.pending_external_edit = None
        return payload

    async def put_file(self, content: str, sha: str, message: str) -> dict[str, object]:
        if sha != self.sha:
            raise RemoteConflictError(
                f"GitHub API conflict (409): {sha} does not match {self.sha}"
            )
        text = base64.b64decode(content).decode("utf-8")
        self.written_texts.append(text)
        self.document = json.loads(text)
        self.version += 1
        self.commits.append(message)
        return {"content": {"sha": self.sha}, "commit": {"message": message}}

    def edit_after_next_read(self, document: dict[str, object]) -> None:
        """Simulate another writer committing right after the next read."""
        self.pending_external_edit = copy.deepcopy(document)


@pytest.fixture
def settings() -> Settings:
    return Settings(github_token="test-token")


@pytest.fixture
def contents_client() -> InMemoryContentsClient:
    return InMemoryContentsClient()


@pytest.fixture
def macro_log_service(contents_client: InMemoryContentsClient) -> MacroLogService:
    return MacroLogService(DocumentService(client=contents_client))


@pytest.fixture
def tools(macro_log_service: MacroLogService) -> MacroTools:
    return MacroTools(macro_log_service)


@pytest.fixture
def container(
    settings: Settings,
    contents_client: InMemoryContentsClient,
    macro_log_service: MacroLogService,
    tools: MacroTools,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        contents_client=contents_client,
        document_service=macro_log_service.documents,
        macro_log_service=macro_log_service,
        tools=tools,
        close_resources=close_resources,
    )

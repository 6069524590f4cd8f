"""GitHub repository contents API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from macro_tracker.domain.errors import RemoteConflictError, RemoteUnavailableError

_USER_AGENT = "macro-tracker-mcp-server"
_API_VERSION = "2022-11-28"


class ContentsClient(Protocol):
    """Interface for reading and replacing one file in a repository."""

    async def get_file(self) -> dict[str, object]:
        """Return the file payload with its sha, content and encoding."""

    async def put_file(self, content: str, sha: str, message: str) -> dict[str, object]:
        """Replace the file content, guarded by the sha it was read at."""


@dataclass
class HttpxGitHubContentsClient(ContentsClient):
    """GitHub contents client implemented with httpx."""

    token: str
    owner: str
    repo: str
    path: str
    branch: str
    api_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        token: str,
        owner: str,
        repo: str,
        path: str,
        branch: str,
        api_url: str = "https://api.github.com",
        timeout_seconds: float = 15,
    ) -> "HttpxGitHubContentsClient":
        """Create a contents client with a managed httpx session."""
        return cls(
            token=token,
            owner=owner,
            repo=repo,
            path=path,
            branch=branch,
            api_url=api_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    @property
    def contents_url(self) -> str:
        """URL of the tracked file in the contents API."""
        return f"{self.api_url}/repos/{self.owner}/{self.repo}/contents/{self.path}"

    async def get_file(self) -> dict[str, object]:
        """Fetch the file at the configured branch."""
        response = await self._send("GET", params={"ref": self.branch})
        _raise_for_status(response)
        return response.json()

    async def put_file(self, content: str, sha: str, message: str) -> dict[str, object]:
        """Commit new base64 content on the configured branch."""
        response = await self._send(
            "PUT",
            json={
                "message": message,
                "content": content,
                "sha": sha,
                "branch": self.branch,
            },
        )
        if response.status_code == httpx.codes.CONFLICT:
            raise RemoteConflictError(
                f"GitHub API conflict ({response.status_code}): {response.text}"
            )
        _raise_for_status(response)
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _send(
        self,
        method: str,
        params: dict[str, str] | None = None,
        json: dict[str, object] | None = None,
    ) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": _API_VERSION,
            "User-Agent": _USER_AGENT,
        }
        try:
            return await self.http_client.request(
                method,
                self.contents_url,
                headers=headers,
                params=params,
                json=json,
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise RemoteUnavailableError(f"GitHub API request failed: {exc}") from exc


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    raise RemoteUnavailableError(
        f"GitHub API error ({response.status_code}): {response.text}",
        status_code=response.status_code,
    )

"""Read-modify-write access to the stored macro document."""

import logging
from dataclasses import dataclass

from macro_tracker.adapters.github_contents_client import ContentsClient
from macro_tracker.domain.codec import decode_document, encode_document
from macro_tracker.domain.errors import MalformedDocumentError
from macro_tracker.domain.macros import MacroData

_logger = logging.getLogger(__name__)


@dataclass
class DocumentService:
    """Fetches the document with its version tag and commits new versions.

    By default a commit is guarded by the tag from the caller's fetch, so an
    external change in between is rejected by the store. With
    ``refresh_sha_before_commit`` the current tag is re-read right before the
    write instead, which only narrows that window.
    """

    client: ContentsClient
    refresh_sha_before_commit: bool = False

    async def fetch(self) -> tuple[MacroData, str]:
        """Return the current document and its version tag."""
        payload = await self.client.get_file()
        encoding = payload.get("encoding")
        if encoding is not None and encoding != "base64":
            raise MalformedDocumentError(f"Unsupported content encoding: {encoding}")
        return decode_document(_require_str(payload, "content")), _require_str(
            payload, "sha"
        )

    async def commit(self, data: MacroData, version_tag: str, message: str) -> None:
        """Write the document as a new commit with the given message."""
        sha = version_tag
        if self.refresh_sha_before_commit:
            sha = _require_str(await self.client.get_file(), "sha")
        await self.client.put_file(encode_document(data), sha, message)
        _logger.info("Committed macro data: %s", message)


def _require_str(payload: dict[str, object], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise MalformedDocumentError(f"Contents response is missing '{key}'")
    return value

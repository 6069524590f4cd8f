"""Codec between the stored file content and the macro document."""

import base64
import binascii
import json

from pydantic import ValidationError

from macro_tracker.domain.errors import MalformedDocumentError
from macro_tracker.domain.macros import MacroData


def render_document(data: MacroData) -> str:
    """Render the document as pretty-printed JSON."""
    return json.dumps(data.model_dump(mode="json"), indent=2, ensure_ascii=False)


def encode_document(data: MacroData) -> str:
    """Encode the document as base64 of its UTF-8 JSON text."""
    return base64.b64encode(render_document(data).encode("utf-8")).decode("ascii")


def decode_document(content: str) -> MacroData:
    """Decode base64 file content into a macro document.

    The contents API wraps base64 at fixed columns, so embedded newlines are
    ignored.
    """
    try:
        text = base64.b64decode(content).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise MalformedDocumentError(
            f"Document content is not base64-encoded UTF-8: {exc}"
        ) from exc
    try:
        return MacroData.model_validate_json(text)
    except ValidationError as exc:
        raise MalformedDocumentError(
            f"Document is not valid macro data: {exc}"
        ) from exc

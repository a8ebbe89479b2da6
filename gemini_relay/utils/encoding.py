"""Inline-data encoding for staged uploads.

``encode(upload)`` reads the staged bytes and returns them base64 encoded
together with the MIME type the model should interpret them as.
"""

from __future__ import annotations

import base64
import mimetypes

from gemini_relay.schemas import InlineContent, Upload
from gemini_relay.utils.io_utils import read_bytes

DEFAULT_MIME = "application/octet-stream"


def resolve_mime_type(upload: Upload) -> str:
    if upload.mime_type and upload.mime_type != DEFAULT_MIME:
        return upload.mime_type
    guessed, _ = mimetypes.guess_type(upload.filename or upload.path)
    return guessed or upload.mime_type or DEFAULT_MIME


def encode(upload: Upload) -> InlineContent:
    """Base64-encode the staged file. Raises OSError if it cannot be read."""
    raw = read_bytes(upload.path)
    return InlineContent(
        data=base64.b64encode(raw).decode("ascii"),
        mime_type=resolve_mime_type(upload),
    )

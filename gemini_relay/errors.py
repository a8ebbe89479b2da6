"""Error types raised along the upload-and-dispatch pipeline.

Client errors (400) are raised before any model call; the rest are
server-side failures (500) that carry the underlying cause in ``details``.
"""

from __future__ import annotations


class RelayError(Exception):
    status = 500


class MissingPromptError(RelayError):
    status = 400


class MissingAttachmentError(RelayError):
    status = 400


class ExtractionError(RelayError):
    """Raised when an uploaded document cannot be turned into text."""


class ModelClientError(RelayError):
    """Raised when the generative model call fails or returns no text."""

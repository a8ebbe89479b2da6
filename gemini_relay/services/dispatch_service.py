"""DispatchService: turns one inbound request into one model call.

Every route follows the same sequence:
1. resolve the prompt (route default when absent; the text route has none);
2. require the attachment for file routes;
3. build the model input (prompt alone, ``[prompt, inline]``, or
   ``prompt + separator + extracted text``);
4. call the model client and wrap the outcome in a ``GenerationResult``.

Errors raised by the encoder, extractor or model client never escape
``dispatch``; they are logged and reported as a 500 result. Missing inputs
are reported as a 400 result before the model is touched. Releasing the
staged file is the caller's job (see ``utils.staging.staged_upload``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from gemini_relay.errors import MissingAttachmentError, MissingPromptError, RelayError
from gemini_relay.schemas import GenerationResult, Upload
from gemini_relay.services.llm_service import ModelInput
from gemini_relay.utils.docx_utils import extract
from gemini_relay.utils.encoding import encode

DOCUMENT_SEPARATOR = "\n\n---\n\n"

ROUTES: Dict[str, Dict[str, Any]] = {
    "text": {
        "field": None,
        "default_prompt": None,
        "failure": "Failed to generate text",
    },
    "image": {
        "field": "image",
        "default_prompt": "Describe the image",
        "failure": "Failed to generate from image",
    },
    "document": {
        "field": "document",
        "default_prompt": "Analyze this document:",
        "failure": "Failed to generate from document",
    },
    "audio": {
        "field": "audio",
        "default_prompt": "Transcribe this audio:",
        "failure": "Failed to generate from audio",
    },
}


def resolve_prompt(kind: str, prompt: Optional[str]) -> str:
    if prompt:
        return prompt
    default = ROUTES[kind]["default_prompt"]
    if default is None:
        raise MissingPromptError("Prompt is required.")
    return default


def require_upload(kind: str, upload: Optional[Upload]) -> Optional[Upload]:
    field = ROUTES[kind]["field"]
    if field is not None and upload is None:
        raise MissingAttachmentError(f"No {field} file uploaded.")
    return upload


def build_model_input(kind: str, prompt: str, upload: Optional[Upload]) -> ModelInput:
    if kind == "text":
        return prompt
    if kind == "document":
        return f"{prompt}{DOCUMENT_SEPARATOR}{extract(upload)}"
    return [prompt, encode(upload)]


class DispatchService:
    def __init__(self, client: Any):
        self.client = client

    def dispatch(self, kind: str, prompt: Optional[str], upload: Optional[Upload] = None) -> GenerationResult:
        if kind not in ROUTES:
            raise ValueError(f"Unknown route kind: {kind}")

        try:
            prompt = resolve_prompt(kind, prompt)
            require_upload(kind, upload)
        except RelayError as e:
            return GenerationResult.failure(str(e), status=e.status)

        try:
            contents = build_model_input(kind, prompt, upload)
            output = self.client.generate(contents)
        except Exception as e:
            logging.exception("Error generating from %s", kind)
            return GenerationResult.failure(ROUTES[kind]["failure"], details=str(e), status=500)
        return GenerationResult.success(output)

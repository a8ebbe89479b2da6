"""Generate routes: POST /generate-text and POST /generate-from-{image,document,audio}

/generate-text takes JSON ``{prompt}``. The file routes take multipart form
data with the attachment under ``image``, ``document`` or ``audio`` and an
optional ``prompt`` field. All routes answer ``{output}`` on success and
``{error, details?}`` on failure.
"""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from gemini_relay.schemas import GenerationResult
from gemini_relay.services.dispatch_service import ROUTES, DispatchService
from gemini_relay.utils.staging import staged_upload

generate_bp = Blueprint("generate", __name__)


def _dispatcher() -> DispatchService:
    return DispatchService(current_app.extensions["model_client"])


def _respond(result: GenerationResult):
    return jsonify(result.to_json()), result.status


def _generate_from_file(kind: str):
    prompt = request.form.get("prompt")
    try:
        with staged_upload(ROUTES[kind]["field"]) as upload:
            result = _dispatcher().dispatch(kind, prompt, upload)
    except OSError as e:
        logging.exception("Could not stage %s upload", kind)
        result = GenerationResult.failure(ROUTES[kind]["failure"], details=str(e))
    return _respond(result)


@generate_bp.route("/generate-text", methods=["POST"])
def generate_text():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    prompt = payload.get("prompt")
    if not prompt:
        prompt = None
    elif not isinstance(prompt, str):
        prompt = str(prompt)
    return _respond(_dispatcher().dispatch("text", prompt))


@generate_bp.route("/generate-from-image", methods=["POST"])
def generate_from_image():
    return _generate_from_file("image")


@generate_bp.route("/generate-from-document", methods=["POST"])
def generate_from_document():
    return _generate_from_file("document")


@generate_bp.route("/generate-from-audio", methods=["POST"])
def generate_from_audio():
    return _generate_from_file("audio")

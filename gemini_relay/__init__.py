"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
enable CORS, attach the model client, and register route blueprints.
"""

from __future__ import annotations

from typing import Any, Optional, Type

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from gemini_relay.config import Config, ensure_upload_dir
from gemini_relay.routes.generate import generate_bp


def create_app(model_client: Optional[Any] = None, config: Type[Config] = Config) -> Flask:
    app = Flask(__name__)
    # Basic config
    app.config.from_object(config)
    app.config["MAX_CONTENT_LENGTH"] = int(config.MAX_UPLOAD_MB * 1024 * 1024)
    ensure_upload_dir(config)

    # Model client is built once here; tests inject a stub instead
    if model_client is None:
        from gemini_relay.services.llm_service import LLMService

        model_client = LLMService(config)
    app.extensions["model_client"] = model_client

    # Allow all origins for local development, including preflight for file upload
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        supports_credentials=False,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "OPTIONS"],
    )

    # Blueprints
    app.register_blueprint(generate_bp)

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(_err):
        return jsonify({"error": f"File too large; max {config.MAX_UPLOAD_MB} MB."}), 413

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app

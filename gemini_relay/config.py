"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the model credential, upload staging
paths and server settings. This keeps the rest of the codebase decoupled
from direct env access.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # This loads the .env file


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return float(raw)


class Config:
    # Base
    RELAY_ENV = os.getenv("RELAY_ENV", "dev")

    # Gemini credential; GOOGLE_API_KEY is what langchain-google-genai reads by default
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    LLM_MODEL = os.getenv("LLM_MODEL", "gemini-2.5-flash")
    LLM_TEMPERATURE = _optional_float("LLM_TEMPERATURE")

    # Upload staging
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.abspath(os.path.join(os.getcwd(), "uploads")))
    MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "50"))

    # Server
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "3000"))


def ensure_upload_dir(cfg: Config = Config) -> None:
    """Ensure the upload staging directory exists."""
    os.makedirs(cfg.UPLOAD_DIR, exist_ok=True)

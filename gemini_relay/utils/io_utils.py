"""IO utilities for staged file operations.

Provides:
- ``ensure_dir(path)``: create directories if missing (no error if exists).
- ``read_bytes(path)``: read a whole file as bytes.
- ``remove_quietly(path)``: best-effort delete that logs instead of raising.
"""

from __future__ import annotations

import logging
import os


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def remove_quietly(path: str) -> bool:
    """Delete ``path``; return False and log if that fails."""
    try:
        os.remove(path)
        return True
    except OSError as e:
        logging.error(f"Error deleting temp file {path}: {e}")
        return False

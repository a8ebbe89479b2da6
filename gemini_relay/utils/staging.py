"""Temporary file store for multipart uploads.

Each uploaded part is written under ``UPLOAD_DIR`` with a unique name so
concurrent requests never share a path. A staged file belongs to the request
that created it and is deleted when that request finishes:

    with staged_upload("image") as upload:
        if upload is None:
            ...  # field missing
        ...      # file is removed on exit, even if this block raises
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator, Optional

from flask import current_app, request

from gemini_relay.config import Config
from gemini_relay.schemas import Upload
from gemini_relay.utils.ids import new_id
from gemini_relay.utils.io_utils import ensure_dir, remove_quietly


def _upload_dir() -> str:
    return current_app.config.get("UPLOAD_DIR", Config.UPLOAD_DIR)


def stage(field_name: str) -> Optional[Upload]:
    """Save the multipart part ``field_name`` to the staging directory.

    Returns None when the request carries no such part or the part has no
    filename. Raises OSError if the file cannot be written; a partial file
    is removed first.
    """
    f = request.files.get(field_name)
    if f is None or not f.filename:
        return None

    udir = _upload_dir()
    ensure_dir(udir)
    ext = os.path.splitext(f.filename)[1].lower()
    dest = os.path.join(udir, new_id("upload") + ext)
    try:
        f.save(dest)
    except OSError:
        # drop whatever part of the file was written
        if os.path.exists(dest):
            remove_quietly(dest)
        raise

    upload = Upload(
        path=dest,
        mime_type=f.mimetype or "",
        field_name=field_name,
        filename=f.filename,
    )
    logging.info(f"Staged {field_name} upload '{f.filename}' at {dest}")
    return upload


def release(upload: Optional[Upload]) -> None:
    """Delete a staged file. Failures are logged, never raised."""
    if upload is None:
        return
    if remove_quietly(upload.path):
        logging.debug(f"Released staged upload {upload.path}")


@contextmanager
def staged_upload(field_name: str) -> Iterator[Optional[Upload]]:
    upload = stage(field_name)
    try:
        yield upload
    finally:
        release(upload)

"""Unique names for staged uploads.

``new_id("upload")`` gives ``upload_<millis>-<uuid16>``: the millisecond
prefix keeps a staging directory listing in arrival order, and the random
suffix keeps concurrent requests from colliding on a path.
"""

from __future__ import annotations

import time
import uuid


def new_id(prefix: str) -> str:
    millis = int(time.time() * 1000)
    rand = uuid.uuid4().hex[:16]
    return f"{prefix}_{millis:013d}-{rand}"

"""Tests for gemini_relay.utils.encoding: inline-data encoding."""

from __future__ import annotations

import base64

import pytest

from gemini_relay.schemas import Upload
from gemini_relay.utils.encoding import encode, resolve_mime_type


def _upload(path, mime="", filename="") -> Upload:
    return Upload(path=str(path), mime_type=mime, field_name="image", filename=filename)


class TestEncode:
    def test_base64_round_trip_and_mime(self, temp_dir):
        path = temp_dir / "upload_1.png"
        path.write_bytes(b"\x00\x01binary\xff")

        part = encode(_upload(path, "image/png", "cat.png"))

        assert part.mime_type == "image/png"
        assert base64.b64decode(part.data) == b"\x00\x01binary\xff"

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.wav"
        path.write_bytes(b"")
        assert encode(_upload(path, "audio/wav")).data == ""

    def test_unreadable_file_raises_oserror(self, temp_dir):
        """A vanished staged file surfaces as OSError for the caller."""
        with pytest.raises(OSError):
            encode(_upload(temp_dir / "missing.png", "image/png"))


class TestResolveMimeType:
    def test_declared_type_wins(self, temp_dir):
        assert resolve_mime_type(_upload(temp_dir / "x.bin", "audio/ogg", "clip.mp3")) == "audio/ogg"

    def test_guesses_from_filename_when_generic(self, temp_dir):
        upload = _upload(temp_dir / "x", "application/octet-stream", "photo.jpeg")
        assert resolve_mime_type(upload) == "image/jpeg"

    def test_guesses_from_filename_when_missing(self, temp_dir):
        assert resolve_mime_type(_upload(temp_dir / "x", "", "scan.png")) == "image/png"

    def test_falls_back_to_octet_stream(self, temp_dir):
        upload = _upload(temp_dir / "x", "", "blob.unknownext")
        assert resolve_mime_type(upload) == "application/octet-stream"

"""Shared pytest fixtures for gemini-relay tests."""

from __future__ import annotations

import io
import shutil
import tempfile
from pathlib import Path
from typing import Any, Generator, List, Optional, Type

import pytest
from docx import Document

from gemini_relay import create_app
from gemini_relay.config import Config


class StubModelClient:
    """Stand-in for LLMService that records every call.

    ``seen_files`` captures the staging directory contents at call time so
    tests can check the upload existed while the model was running.
    """

    def __init__(self, output: str = "Hello", error: Optional[Exception] = None, upload_dir: Optional[Path] = None):
        self.output = output
        self.error = error
        self.upload_dir = upload_dir
        self.calls: List[Any] = []
        self.seen_files: List[List[str]] = []

    def generate(self, contents: Any) -> str:
        self.calls.append(contents)
        if self.upload_dir is not None:
            self.seen_files.append(sorted(p.name for p in self.upload_dir.iterdir()))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def upload_dir(temp_dir: Path) -> Path:
    return temp_dir / "uploads"


@pytest.fixture
def test_config(upload_dir: Path) -> Type[Config]:
    """Config subclass pointing the staging directory at a temp path."""

    class TestConfig(Config):
        TESTING = True
        UPLOAD_DIR = str(upload_dir)
        GEMINI_API_KEY = "test-key"

    return TestConfig


@pytest.fixture
def model_client(upload_dir: Path) -> StubModelClient:
    return StubModelClient(upload_dir=upload_dir)


@pytest.fixture
def failing_model_client(upload_dir: Path) -> StubModelClient:
    return StubModelClient(error=RuntimeError("quota exceeded"), upload_dir=upload_dir)


@pytest.fixture
def app(model_client: StubModelClient, test_config: Type[Config]):
    return create_app(model_client=model_client, config=test_config)


@pytest.fixture
def test_client(app):
    return app.test_client()


@pytest.fixture
def failing_test_client(failing_model_client: StubModelClient, test_config: Type[Config]):
    return create_app(model_client=failing_model_client, config=test_config).test_client()


@pytest.fixture
def docx_bytes() -> bytes:
    """A one-paragraph DOCX whose extracted text is ``Body text``."""
    doc = Document()
    doc.add_paragraph("Body text")
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()

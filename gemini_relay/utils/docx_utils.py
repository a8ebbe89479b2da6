"""Document text extraction using python-docx (and PyMuPDF for PDFs).

Functions:
- ``extract_docx_text(path)``: raw text of a DOCX body, paragraphs and
  table cells in document order, separated by blank lines.
- ``extract_pdf_text(path)``: text of every PDF page, separated by blank lines.
- ``extract(upload)``: dispatch on the staged file's extension.

Anything that is not a well-formed supported document raises
``ExtractionError``.
"""

from __future__ import annotations

import os
from typing import Iterator, List

import fitz  # PyMuPDF
from docx import Document
from docx.table import Table

from gemini_relay.errors import ExtractionError
from gemini_relay.schemas import Upload

DOCX_EXTS = {".docx"}
PDF_EXTS = {".pdf"}
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _table_texts(table: Table) -> Iterator[str]:
    for row in table.rows:
        for cell in row.cells:
            text = cell.text.strip()
            if text:
                yield text


def extract_docx_text(path: str) -> str:
    try:
        doc = Document(path)
    except Exception as e:
        raise ExtractionError(f"Could not read DOCX file: {e}") from e

    parts: List[str] = []
    for block in doc.iter_inner_content():
        if isinstance(block, Table):
            parts.extend(_table_texts(block))
            continue
        text = block.text.strip()
        if text:
            parts.append(text)
    return "\n\n".join(parts)


def extract_pdf_text(path: str) -> str:
    try:
        doc = fitz.open(path)
    except Exception as e:
        raise ExtractionError(f"Could not read PDF file: {e}") from e
    try:
        if getattr(doc, "needs_pass", False):
            raise ExtractionError("PDF is password-protected.")
        if doc.page_count == 0:
            raise ExtractionError("PDF has no pages.")
        pages = [page.get_text().strip() for page in doc]
    finally:
        doc.close()
    return "\n\n".join(p for p in pages if p)


def _kind(upload: Upload) -> str:
    ext = os.path.splitext(upload.filename or upload.path)[1].lower()
    if ext in DOCX_EXTS or upload.mime_type == DOCX_MIME:
        return "docx"
    if ext in PDF_EXTS or upload.mime_type == "application/pdf":
        return "pdf"
    return ""


def extract(upload: Upload) -> str:
    """Return the plain text of a staged .docx or .pdf upload."""
    kind = _kind(upload)
    if kind == "docx":
        return extract_docx_text(upload.path)
    if kind == "pdf":
        return extract_pdf_text(upload.path)
    name = upload.filename or os.path.basename(upload.path)
    raise ExtractionError(f"Unsupported document type: {name}. Only .docx or .pdf files are allowed.")

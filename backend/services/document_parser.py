"""Plain-text extraction from uploaded resume files."""

import io
import logging
from pathlib import PurePath

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)

PLAIN_TEXT_EXTENSIONS = frozenset({"", ".txt", ".md", ".text"})


class UnsupportedDocumentError(ValueError):
    """Raised for file types we cannot pull text out of."""


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all paragraph text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_plain(content: bytes) -> str:
    return content.decode("utf-8", errors="replace").strip()


def extract_text(content: bytes, filename: str | None) -> str:
    """Extract text from an uploaded file, dispatching on its extension."""
    ext = PurePath(filename or "").suffix.lower()
    if ext == ".pdf":
        return extract_text_pdf(content)
    if ext == ".docx":
        return extract_text_docx(content)
    if ext in PLAIN_TEXT_EXTENSIONS:
        return extract_text_plain(content)
    logger.warning("Rejected upload with unsupported extension: %r", ext)
    raise UnsupportedDocumentError(f"Unsupported file type: {ext}")

"""Resume PDF parsing using pypdf.

Turns uploaded resume bytes into plain text plus document metadata.
"""

import io
import logging
import re

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"

_METADATA_FIELDS = {
    "/Title": "title",
    "/Author": "author",
    "/Subject": "subject",
    "/Creator": "creator",
    "/Producer": "producer",
}


class ResumeContent(BaseModel):
    """Text and metadata extracted from a resume PDF.

    Attributes:
        text: Normalized text of all pages, pages separated by a blank line.
        pages: Total number of pages in the document.
        metadata: Non-empty document info fields.
    """

    text: str
    pages: int = Field(ge=0)
    metadata: dict[str, str]


class ResumeParseError(Exception):
    """Raised when a resume cannot be read as a PDF."""


def _check_bytes(file_content: bytes) -> None:
    if not file_content:
        raise ResumeParseError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise ResumeParseError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise ResumeParseError("Invalid PDF: file does not start with PDF header")


def normalize_text(text: str) -> str:
    """Collapse runs of spaces and trim trailing whitespace on each line."""
    lines = [re.sub(r"[ \t]+", " ", line).rstrip() for line in text.splitlines()]
    return re.sub(r"\n{3,}", "\n\n", "\n".join(lines)).strip()


def _read_metadata(reader: PdfReader) -> dict[str, str]:
    metadata: dict[str, str] = {}
    try:
        info = reader.metadata
        if info:
            for key, name in _METADATA_FIELDS.items():
                value = info.get(key)
                if value:
                    metadata[name] = str(value)
    except Exception as e:
        logger.warning(f"Failed to read resume metadata: {e}")
    return metadata


def parse_resume_pdf(file_content: bytes) -> ResumeContent:
    """Extract the text of a resume PDF.

    Args:
        file_content: Raw bytes of the uploaded file.

    Returns:
        ResumeContent with normalized text, page count, and metadata.

    Raises:
        ResumeParseError: If the file is empty, too large, not a PDF, or corrupt.
    """
    _check_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise ResumeParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise ResumeParseError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise ResumeParseError("PDF contains no pages")

    page_texts: list[str] = []
    for number, page in enumerate(reader.pages, start=1):
        try:
            extracted = page.extract_text()
        except Exception as e:
            logger.warning(f"Failed to extract text from page {number}: {e}")
            continue
        if extracted and extracted.strip():
            page_texts.append(normalize_text(extracted))

    text = "\n\n".join(page_texts)
    if not text:
        logger.warning("Resume has no extractable text (may be scanned/image-based)")

    return ResumeContent(text=text, pages=pages, metadata=_read_metadata(reader))

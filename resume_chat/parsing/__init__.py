"""Resume parsing utilities.

Responsibilities:
    - PDF text extraction with pypdf
    - Whitespace normalization of extracted text
    - Metadata extraction (title, author, producer)
"""

from resume_chat.parsing.pdf_parser import (
    MAX_FILE_SIZE,
    ResumeContent,
    ResumeParseError,
    parse_resume_pdf,
)

__all__ = ["MAX_FILE_SIZE", "ResumeContent", "ResumeParseError", "parse_resume_pdf"]

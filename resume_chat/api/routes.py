"""Resume upload endpoint.

Handles file upload, validation, parsing, and session storage.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from resume_chat.api.sessions import ResumeStore, get_resume_store
from resume_chat.models.schemas import ResumeDocument, UploadResponse
from resume_chat.parsing.pdf_parser import MAX_FILE_SIZE, ResumeParseError, parse_resume_pdf

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])

MAX_UPLOAD_SIZE = MAX_FILE_SIZE


def _validate_filename(filename: str | None) -> str:
    """Check that a filename is present and names a PDF.

    Raises:
        HTTPException: 400 if the name is missing or not a .pdf.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF resumes are accepted",
        )

    return filename


async def _read_limited(file: UploadFile) -> bytes:
    """Read the upload, rejecting anything over the size limit.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/upload", response_model=UploadResponse)
async def upload_resume(
    file: UploadFile,
    store: ResumeStore = Depends(get_resume_store),
) -> UploadResponse:
    """Upload a resume and open a chat session for it.

    Parses the PDF into text and stores it under a new session id. The
    client passes that id when connecting to the chat WebSocket.

    Args:
        file: The uploaded resume (multipart/form-data field ``file``).
        store: Session store for parsed resumes.

    Returns:
        UploadResponse with filename, page count, and session id.

    Raises:
        400: Missing filename, not a PDF, empty or corrupt file.
        413: File exceeds 10MB limit.
    """
    filename = _validate_filename(file.filename)
    content = await _read_limited(file)

    try:
        parsed = parse_resume_pdf(content)
    except ResumeParseError as e:
        logger.warning(f"Resume parse error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    session_id = store.create_session(
        ResumeDocument(
            filename=filename,
            text=parsed.text,
            pages=parsed.pages,
            metadata=parsed.metadata,
        )
    )
    logger.info(f"Parsed resume {filename} ({parsed.pages} pages)")

    return UploadResponse(
        filename=filename,
        pages=parsed.pages,
        session_id=session_id,
        success=True,
    )

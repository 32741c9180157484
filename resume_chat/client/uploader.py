"""Upload transport: sends the resume to the API as multipart form data."""

import logging

import httpx

from resume_chat.models.schemas import ResumeFile, UploadResponse

logger = logging.getLogger(__name__)

ACCEPTED_EXTENSIONS = ".pdf,.doc,.docx"


class UploadError(Exception):
    """Raised when the upload request fails or is refused."""


def is_accepted_media_type(content_type: str | None) -> bool:
    """Return True for PDFs and office document types."""
    if not content_type:
        return False
    return content_type == "application/pdf" or "document" in content_type


async def upload_resume(
    upload_url: str,
    file: ResumeFile,
    timeout: float = 60.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> UploadResponse:
    """POST a resume to the upload endpoint.

    Args:
        upload_url: Full URL of the upload endpoint.
        file: File picked by the user.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (used to call an in-process app).

    Returns:
        The parsed UploadResponse.

    Raises:
        UploadError: On any non-2xx status or network error.
    """
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        try:
            response = await client.post(
                upload_url,
                files={"file": (file.name, file.content, file.content_type)},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UploadError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise UploadError(f"Connection failed: {e}") from e

    try:
        return UploadResponse.model_validate(response.json())
    except ValueError as e:
        raise UploadError(f"Unexpected upload response: {e}") from e

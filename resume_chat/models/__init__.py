"""Pydantic models shared by the client and the API.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Role: Speaker of a message (user or assistant)
    - Message: Immutable chat history entry
    - ResumeFile: File picked for upload on the client
    - Notification: User-visible notice
    - UploadResponse: Result of POST /upload
    - ResumeDocument: Parsed resume kept per session on the server
"""

from resume_chat.models.schemas import (
    STREAM_END_TOKEN,
    Message,
    Notification,
    ResumeDocument,
    ResumeFile,
    Role,
    UploadResponse,
)

__all__ = [
    "STREAM_END_TOKEN",
    "Message",
    "Notification",
    "ResumeDocument",
    "ResumeFile",
    "Role",
    "UploadResponse",
]

"""Shared data models for the chat client and the backend service."""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Reserved literal the backend sends after the last fragment of a reply
STREAM_END_TOKEN = "[DONE]"


class Role(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single entry in the chat history.

    Messages are immutable. Streaming updates produce a copy with the
    extended content instead of editing the entry in place.

    Attributes:
        id: Opaque unique identifier.
        content: Message text.
        role: Who wrote the message.
        timestamp: Creation time.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    content: str
    role: Role
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.role is Role.USER

    def with_appended(self, fragment: str) -> "Message":
        """Return a copy of this message with ``fragment`` added to the content."""
        return self.model_copy(update={"content": self.content + fragment})


class ResumeFile(BaseModel):
    """A file picked by the user for upload.

    Attributes:
        name: Original filename.
        content_type: Declared media type.
        content: Raw file bytes.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    content_type: str = ""
    content: bytes = Field(default=b"", repr=False)

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def size_kb(self) -> str:
        return f"{self.size / 1024:.1f} KB"


class Notification(BaseModel):
    """A short user-visible notice.

    Attributes:
        title: Headline.
        description: One sentence of detail.
        destructive: Whether this notice reports a failure.
    """

    title: str
    description: str
    destructive: bool = False


class UploadResponse(BaseModel):
    """Response after resume upload processing.

    Attributes:
        filename: Name of the uploaded file.
        pages: Number of pages in the document.
        session_id: Chat session the resume is attached to.
        success: Whether the upload was successful.
        error: Error message if upload failed.
    """

    filename: str
    pages: int
    session_id: str
    success: bool
    error: str | None = None


class ResumeDocument(BaseModel):
    """Parsed resume stored for a chat session."""

    filename: str
    text: str
    pages: int = Field(ge=0)
    metadata: dict[str, str] = Field(default_factory=dict)
    uploaded_at: datetime = Field(default_factory=datetime.now)

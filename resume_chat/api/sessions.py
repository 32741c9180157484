"""In-memory resume store keyed by chat session id.

The upload endpoint creates a session and stores the parsed resume; the
WebSocket endpoint looks it up when a client connects with that session id.
"""

import logging
import uuid

from resume_chat.models.schemas import ResumeDocument

logger = logging.getLogger(__name__)


class ResumeStore:
    """Parsed resumes for active chat sessions."""

    def __init__(self) -> None:
        self._resumes: dict[str, ResumeDocument] = {}

    def create_session(self, document: ResumeDocument) -> str:
        session_id = uuid.uuid4().hex
        self._resumes[session_id] = document
        logger.info(f"Stored resume {document.filename} for session {session_id[:8]}")
        return session_id

    def get(self, session_id: str | None) -> ResumeDocument | None:
        if not session_id:
            return None
        return self._resumes.get(session_id)

    def discard(self, session_id: str) -> None:
        if self._resumes.pop(session_id, None) is not None:
            logger.info(f"Discarded resume for session {session_id[:8]}")

    def clear(self) -> None:
        self._resumes.clear()

    def __len__(self) -> int:
        return len(self._resumes)


_store: ResumeStore | None = None


def get_resume_store() -> ResumeStore:
    """Get or create the global resume store."""
    global _store
    if _store is None:
        _store = ResumeStore()
    return _store

"""FastAPI endpoints for the resume chat backend.

Endpoints:
    - GET /health: Service health status
    - POST /upload: Resume upload, returns a chat session id
    - WS /ws?session_id=...: Streamed answers terminated by [DONE]
"""

from resume_chat.api.app import app, create_app

__all__ = ["app", "create_app"]

"""Chat WebSocket endpoint.

Each text message from the client is answered by streaming the responder's
fragments as separate text frames, followed by the end token.
"""

import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from resume_chat.agent.responders import Responder, get_responder
from resume_chat.api.sessions import ResumeStore, get_resume_store
from resume_chat.models.schemas import STREAM_END_TOKEN

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


async def _stream_answer(
    websocket: WebSocket,
    responder: Responder,
    question: str,
    resume: str | None,
) -> None:
    try:
        async for fragment in responder.stream_response(question, resume):
            await websocket.send_text(fragment)
    except WebSocketDisconnect:
        raise
    except Exception as e:
        logger.error(f"Responder failed: {e}")
        await websocket.send_text(f"\n\n[Error: {e}]")
    await websocket.send_text(STREAM_END_TOKEN)


@router.websocket("/ws")
async def chat_socket(
    websocket: WebSocket,
    session_id: str | None = None,
    store: ResumeStore = Depends(get_resume_store),
    responder: Responder = Depends(get_responder),
) -> None:
    """Answer questions about the resume uploaded for ``session_id``.

    Without a known session the questions are answered without resume context.
    """
    await websocket.accept()

    document = store.get(session_id)
    resume = document.text if document else None
    if document is None:
        logger.warning(f"Chat opened without a stored resume (session={session_id})")
    else:
        logger.info(f"Chat opened for {document.filename}")

    try:
        while True:
            question = await websocket.receive_text()
            await _stream_answer(websocket, responder, question, resume)
    except WebSocketDisconnect as e:
        logger.info(f"Chat client disconnected (code={e.code})")
    finally:
        # A new upload always creates a new session
        if session_id:
            store.discard(session_id)

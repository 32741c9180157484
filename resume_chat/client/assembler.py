"""Streaming message assembly.

Merges text fragments received over the chat connection into the message
history. One assistant turn starts when the user sends a message and ends
when the backend sends ``STREAM_END_TOKEN``:

    IDLE --begin_turn--> AWAITING_FIRST_CHUNK --fragment--> STREAMING
      ^                          |                             |
      +-------- end token / reset ---------------------------+

The history is an immutable tuple. Extending the trailing assistant entry
replaces the last element rather than editing it.
"""

import logging
from enum import Enum

from resume_chat.models.schemas import STREAM_END_TOKEN, Message, Role

logger = logging.getLogger(__name__)


class TurnState(str, Enum):
    """Position of the assembler within an assistant turn."""

    IDLE = "idle"
    AWAITING_FIRST_CHUNK = "awaiting_first_chunk"
    STREAMING = "streaming"


class StreamingMessageAssembler:
    """Builds the chat history from user sends and inbound fragments."""

    def __init__(self, end_token: str = STREAM_END_TOKEN) -> None:
        self._end_token = end_token
        self._messages: tuple[Message, ...] = ()
        self._state = TurnState.IDLE
        self._is_loading = False

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._messages

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    def begin_turn(self, content: str) -> Message:
        """Record a user message and wait for the reply.

        Args:
            content: Text the user sent.

        Returns:
            The appended user message.
        """
        message = Message(content=content, role=Role.USER)
        self._messages = (*self._messages, message)
        self._state = TurnState.AWAITING_FIRST_CHUNK
        self._is_loading = True
        return message

    def receive(self, fragment: str) -> Message | None:
        """Apply one inbound fragment.

        The end token finishes the turn. Any other fragment extends the
        trailing assistant entry, or opens a new one when the last entry
        is not from the assistant.

        Args:
            fragment: Raw text received from the connection.

        Returns:
            The created or updated assistant message, or None for the end token.
        """
        if fragment == self._end_token:
            self._state = TurnState.IDLE
            self._is_loading = False
            return None

        last = self._messages[-1] if self._messages else None
        if last is not None and last.role is Role.ASSISTANT:
            updated = last.with_appended(fragment)
            self._messages = (*self._messages[:-1], updated)
        else:
            if self._state is TurnState.IDLE:
                logger.debug("Fragment arrived outside a turn; opening assistant message")
            updated = Message(content=fragment, role=Role.ASSISTANT)
            self._messages = (*self._messages, updated)
            self._is_loading = False

        self._state = TurnState.STREAMING
        return updated

    def reset(self) -> None:
        """Abandon the current turn, keeping whatever content has arrived."""
        self._state = TurnState.IDLE
        self._is_loading = False

    def clear(self) -> None:
        """Drop the whole history."""
        self._messages = ()
        self.reset()

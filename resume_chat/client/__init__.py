"""Chat client: page controller and the state it owns.

Responsibilities:
    - Streaming assembly of assistant replies from inbound fragments
    - Resume upload over HTTP and chat connection lifecycle
    - Input buffer rules for sending messages

Contains no rendering. The NiceGUI views in ``resume_chat.ui`` read from
the controller and call its operations.
"""

from resume_chat.client.assembler import StreamingMessageAssembler, TurnState
from resume_chat.client.composer import InputComposer
from resume_chat.client.config import ClientConfig, get_client_config
from resume_chat.client.connection import ChatConnection
from resume_chat.client.controller import ResumeChatController, coerce_fragment
from resume_chat.client.uploader import UploadError, is_accepted_media_type, upload_resume

__all__ = [
    "ChatConnection",
    "ClientConfig",
    "InputComposer",
    "ResumeChatController",
    "StreamingMessageAssembler",
    "TurnState",
    "UploadError",
    "coerce_fragment",
    "get_client_config",
    "is_accepted_media_type",
    "upload_resume",
]

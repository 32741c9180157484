"""Page controller for the resume chat.

Owns the session state (uploaded resume, message history, loading flag)
and the single chat connection. The connection exists exactly while a
resume is uploaded: it is opened after a successful upload and closed
when the resume is removed, replaced, or the page goes away.

All handlers run on one asyncio event loop, so state changes never overlap.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from websockets.exceptions import ConnectionClosed, WebSocketException

from resume_chat.client.assembler import StreamingMessageAssembler
from resume_chat.client.config import ClientConfig, get_client_config
from resume_chat.client.connection import ChatConnection
from resume_chat.client.uploader import UploadError, is_accepted_media_type, upload_resume
from resume_chat.models.schemas import Message, Notification, ResumeFile, UploadResponse

logger = logging.getLogger(__name__)

Notifier = Callable[[Notification], None]
Uploader = Callable[[ResumeFile], Awaitable[UploadResponse]]
Connector = Callable[[str], Awaitable[ChatConnection]]


def coerce_fragment(frame: object) -> str:
    """Turn an inbound frame into text.

    Text frames pass through. Binary frames are decoded as UTF-8 with
    replacement characters; anything else is stringified.
    """
    if isinstance(frame, str):
        return frame
    if isinstance(frame, (bytes, bytearray)):
        logger.warning(f"Received binary frame ({len(frame)} bytes); decoding as text")
        return bytes(frame).decode("utf-8", errors="replace")
    logger.warning(f"Received unexpected frame type {type(frame).__name__}; stringifying")
    return str(frame)


def _log_notification(notification: Notification) -> None:
    level = logging.WARNING if notification.destructive else logging.INFO
    logger.log(level, f"{notification.title}: {notification.description}")


class ResumeChatController:
    """Coordinates upload, connection lifecycle, and message streaming.

    Args:
        config: Endpoints to use. Loaded from environment if not provided.
        notify: Receives user-visible notices.
        on_change: Called after every state change so views can re-render.
        uploader: Upload transport. Defaults to an httpx multipart POST.
        connector: Opens the chat channel for a URL.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        notify: Notifier | None = None,
        on_change: Callable[[], None] | None = None,
        uploader: Uploader | None = None,
        connector: Connector | None = None,
    ) -> None:
        self._config = config or get_client_config()
        self._notify = notify or _log_notification
        self._on_change = on_change
        self._upload = uploader or self._upload_over_http
        self._connect = connector or ChatConnection.open

        self.assembler = StreamingMessageAssembler()
        self.uploaded_file: ResumeFile | None = None
        self.session_id: str | None = None
        self._connection: ChatConnection | None = None
        self._reader: asyncio.Task[None] | None = None

    @property
    def messages(self) -> tuple[Message, ...]:
        return self.assembler.messages

    @property
    def is_loading(self) -> bool:
        return self.assembler.is_loading

    @property
    def has_resume(self) -> bool:
        return self.uploaded_file is not None

    @property
    def is_connected(self) -> bool:
        return self._connection is not None and self._connection.is_open

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def _upload_over_http(self, file: ResumeFile) -> UploadResponse:
        return await upload_resume(
            self._config.upload_url, file, timeout=self._config.upload_timeout
        )

    async def upload(self, file: ResumeFile) -> bool:
        """Upload a resume and start a fresh chat session for it.

        Files that are neither PDFs nor documents are ignored.

        Returns:
            True if the resume was accepted by the backend.
        """
        if not is_accepted_media_type(file.content_type):
            logger.info(f"Ignoring {file.name}: unsupported type {file.content_type!r}")
            return False

        try:
            result = await self._upload(file)
        except UploadError as e:
            logger.error(f"Resume upload failed for {file.name}: {e}")
            self._notify(
                Notification(
                    title="Upload failed",
                    description=(
                        "Could not upload resume. Please ensure the backend "
                        "is running and try again."
                    ),
                    destructive=True,
                )
            )
            return False

        await self._disconnect()
        self.assembler.clear()
        self.uploaded_file = file
        self.session_id = result.session_id
        self._notify(
            Notification(
                title="Resume uploaded!",
                description=f"{file.name} is ready for analysis.",
            )
        )
        self._changed()

        await self._open_channel()
        return True

    async def remove_file(self) -> None:
        """Forget the resume, its conversation, and its connection."""
        await self._disconnect()
        self.uploaded_file = None
        self.session_id = None
        self.assembler.clear()
        self._notify(
            Notification(
                title="Resume removed",
                description="Upload a new resume to continue.",
            )
        )
        self._changed()

    async def send_message(self, content: str) -> bool:
        """Send a user message over the open connection.

        Returns:
            True if the message was written to the channel.
        """
        connection = self._connection
        if connection is None or not connection.is_open:
            self._notify(
                Notification(
                    title="Connection not available",
                    description="Please upload a resume to start chatting.",
                    destructive=True,
                )
            )
            return False

        self.assembler.begin_turn(content)
        self._changed()
        try:
            await connection.send(content)
        except ConnectionClosed as e:
            logger.error(f"Failed to send message: {e}")
            self.assembler.reset()
            self._notify(
                Notification(
                    title="Connection not available",
                    description="The message could not be sent.",
                    destructive=True,
                )
            )
            self._changed()
            return False
        return True

    def handle_frame(self, frame: object) -> None:
        """Apply one inbound frame to the history."""
        self.assembler.receive(coerce_fragment(frame))
        self._changed()

    async def close(self) -> None:
        """Release the connection. Call when the page is torn down."""
        await self._disconnect()

    async def _open_channel(self) -> None:
        url = f"{self._config.ws_url}?session_id={self.session_id}"
        try:
            connection = await self._connect(url)
        except (OSError, WebSocketException) as e:
            logger.error(f"Could not open chat connection to {url}: {e}")
            self._notify(
                Notification(
                    title="Connection closed",
                    description="The connection to the chat service has been closed.",
                )
            )
            self._changed()
            return

        self._connection = connection
        self._notify(
            Notification(
                title="Connection established",
                description="You can now start chatting with your resume.",
            )
        )
        self._reader = asyncio.create_task(self._read_frames(connection))

    async def _read_frames(self, connection: ChatConnection) -> None:
        try:
            async for frame in connection.frames():
                self.handle_frame(frame)
        finally:
            if self._connection is connection:
                self._connection = None
            self.assembler.reset()
            self._notify(
                Notification(
                    title="Connection closed",
                    description="The connection to the chat service has been closed.",
                )
            )
            self._changed()

    async def _disconnect(self) -> None:
        connection, reader = self._connection, self._reader
        self._connection = None
        self._reader = None
        if connection is not None:
            await connection.close()
        if reader is not None:
            await reader
        self.assembler.reset()

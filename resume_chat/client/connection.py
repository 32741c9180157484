"""Chat channel over a WebSocket."""

import logging
from collections.abc import AsyncIterator

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosedError
from websockets.protocol import State

logger = logging.getLogger(__name__)


class ChatConnection:
    """One duplex text channel to the chat endpoint.

    Frames are passed through untouched: outbound text is the raw user
    message, inbound frames are reply fragments and the end token.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self._ws: ClientConnection | None = None

    @classmethod
    async def open(cls, url: str) -> "ChatConnection":
        """Connect to ``url`` and return the open channel.

        Raises:
            OSError: If the server is unreachable.
            websockets.exceptions.InvalidHandshake: If the upgrade is refused.
        """
        connection = cls(url)
        connection._ws = await connect(url)
        logger.info(f"Chat connection opened: {url}")
        return connection

    @property
    def is_open(self) -> bool:
        return self._ws is not None and self._ws.state is State.OPEN

    async def send(self, text: str) -> None:
        if self._ws is None:
            raise RuntimeError("Connection was never opened")
        await self._ws.send(text)

    async def frames(self) -> AsyncIterator[str | bytes]:
        """Yield inbound frames until the connection closes."""
        if self._ws is None:
            return
        try:
            async for frame in self._ws:
                yield frame
        except ConnectionClosedError as e:
            logger.warning(f"Chat connection dropped: {e}")

    async def close(self) -> None:
        if self._ws is not None and self._ws.state is not State.CLOSED:
            await self._ws.close()
            logger.info(f"Chat connection closed: {self.url}")

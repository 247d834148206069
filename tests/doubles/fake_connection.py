"""Fake ``websockets`` client connection for transport tests.

FakeConnector stands in for ``websockets.connect``: calling it returns an
async context manager yielding a FakeConnection.
"""

import asyncio
import contextlib
from typing import Any, List, Optional

# Pushed into a FakeConnection to end the message stream cleanly
CLOSE = object()


class FakeConnection:
    """Client connection whose inbound stream is fed by the test.

    Attributes:
        sent: Payloads written with send()
        close_calls: Number of close() calls
        send_error: Exception raised by send() when set

    Example:
        >>> connection.push('{"id": "1"}')   # message
        >>> connection.push(OSError("reset"))  # abnormal close
        >>> connection.push(CLOSE)             # clean close
    """

    def __init__(self, send_error: Optional[Exception] = None):
        self.sent: List[Any] = []
        self.close_calls = 0
        self.send_error = send_error
        self._incoming: asyncio.Queue = asyncio.Queue()

    def push(self, item: Any) -> None:
        """Queue a message, an exception to raise, or CLOSE."""
        self._incoming.put_nowait(item)

    async def send(self, payload: Any) -> None:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(payload)

    async def close(self) -> None:
        self.close_calls += 1
        self._incoming.put_nowait(CLOSE)

    def __aiter__(self):
        return self

    async def __anext__(self) -> Any:
        item = await self._incoming.get()
        if item is CLOSE:
            raise StopAsyncIteration
        if isinstance(item, Exception):
            raise item
        return item


class FakeConnector:
    """Replacement for ``websockets.connect`` recording every attempt.

    Attributes:
        urls: URLs connected to, in order
        connections: Connections handed out, in order
        error: Exception raised instead of connecting when set
        send_error: Passed to every new FakeConnection
    """

    def __init__(
        self,
        error: Optional[Exception] = None,
        send_error: Optional[Exception] = None,
    ):
        self.urls: List[str] = []
        self.connections: List[FakeConnection] = []
        self.error = error
        self.send_error = send_error

    def __call__(self, url: str):
        return self._connect(url)

    @contextlib.asynccontextmanager
    async def _connect(self, url: str):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        connection = FakeConnection(send_error=self.send_error)
        self.connections.append(connection)
        yield connection

"""WebSocket transport built on the ``websockets`` client.

This module implements the ISocket interface and wires a client connection's
lifecycle to an IOperator (normally a ConnectionSupervisor):

- connect succeeds → ``handle_websocket_open()``
- every received message → ``on_message(socket, message)``; a handler that
  raises is logged and the connection stays up
- connect failure or abnormal close → ``handle_websocket_error(socket)``
- clean close by the peer → ``handle_websocket_closed(socket)``
"""

import asyncio
import logging
from typing import Any, Callable, Optional, Set

import websockets
from websockets.exceptions import ConnectionClosedOK

from ...domain.exceptions import TransportError
from ...domain.interfaces import IOperator, ISocket
from ..decorators import handle_transport_errors

_LOGGER = logging.getLogger(__name__)

MessageHandler = Callable[[ISocket, Any], None]


class WebSocketTransport(ISocket):
    """One client WebSocket connection attempt.

    Constructing the transport immediately starts connecting on the running
    event loop. Instances are never reused: a supervisor creates a new one
    for every (re)connect, and signals from an instance that was closed
    locally are suppressed.

    Attributes:
        url: WebSocket URL
        _operator: Receiver of lifecycle signals
        _on_message: Receiver of inbound messages
        _connection: Open client connection (None until open)
        _closing: Set once close() was called locally

    Example:
        >>> transport = WebSocketTransport("ws://127.0.0.1:8765/ws", supervisor, on_message)
        >>> # ... supervisor.handle_websocket_open() is called once connected
        >>> transport.send('{"type": "hello"}')
        >>> transport.close()
    """

    def __init__(
        self,
        url: str,
        operator: IOperator,
        on_message: MessageHandler,
        connect: Optional[Callable[..., Any]] = None,
    ):
        """Initialize transport and start connecting.

        Args:
            url: WebSocket URL to connect to
            operator: Receiver of open/error/close signals
            on_message: Called with (transport, message) for inbound messages
            connect: Connection factory (defaults to ``websockets.connect``)
        """
        self.url = url
        self._operator = operator
        self._on_message = on_message
        self._connect = connect or websockets.connect
        self._connection: Optional[Any] = None
        self._closing = False
        self._writes: Set[asyncio.Task] = set()
        self._loop = asyncio.get_running_loop()
        self._task = self._loop.create_task(self._run())

    @property
    def is_open(self) -> bool:
        """Check if the connection is open and not closing."""
        return self._connection is not None and not self._closing

    async def _run(self) -> None:
        """Connect, pump messages and report how the connection ended."""
        try:
            async with self._connect(self.url) as connection:
                self._connection = connection
                if self._closing:
                    return
                _LOGGER.info("WebSocket connected: %s", self.url)
                self._operator.handle_websocket_open()

                async for message in connection:
                    if self._closing:
                        return
                    self._deliver(message)
        except asyncio.CancelledError:
            raise
        except ConnectionClosedOK as err:
            _LOGGER.debug("WebSocket closed cleanly: %s", err)
        except Exception as err:
            self._connection = None
            if self._closing:
                return
            _LOGGER.error("WS error (%s): %s", self.url, err)
            self._operator.handle_websocket_error(self)
            return

        self._connection = None
        if not self._closing:
            _LOGGER.warning("WebSocket closed by peer: %s", self.url)
            self._operator.handle_websocket_closed(self)

    @handle_transport_errors("Message handler", logger=_LOGGER, reraise=False)
    def _deliver(self, message: Any) -> None:
        self._on_message(self, message)

    def send(self, payload: Any) -> None:
        """Schedule a write of ``payload``.

        Raises:
            TransportError: If the connection is not open
        """
        if not self.is_open:
            raise TransportError(f"WebSocket {self.url} is not open")

        task = self._loop.create_task(self._write(self._connection, payload))
        self._writes.add(task)
        task.add_done_callback(self._writes.discard)

    @handle_transport_errors("WebSocket send", logger=_LOGGER, reraise=False)
    async def _write(self, connection: Any, payload: Any) -> None:
        await connection.send(payload)

    def close(self) -> None:
        """Close the connection. Idempotent; suppresses further signals."""
        if self._closing:
            return
        self._closing = True

        if self._connection is not None:
            task = self._loop.create_task(self._shutdown_connection(self._connection))
            self._writes.add(task)
            task.add_done_callback(self._writes.discard)
        elif not self._task.done() and self._task is not asyncio.current_task(self._loop):
            # Still connecting; closed from within _run the task ends by itself
            self._task.cancel()

    @handle_transport_errors("WebSocket close", logger=_LOGGER, reraise=False)
    async def _shutdown_connection(self, connection: Any) -> None:
        await connection.close()

    def __repr__(self) -> str:
        return f"WebSocketTransport(url={self.url!r}, open={self.is_open})"

# Copyright (c) 2026 tether Contributors
# Licensed under the MIT License

"""ManagedWebSocket: a self-healing WebSocket client.

Composes the three layers of tether for one URL:

- ConnectionSupervisor keeps the connection alive
- WebSocketTransport is the socket the supervisor creates on every (re)connect
- ExchangeCorrelator matches inbound messages with commands sent via ``call``
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from .application.services import ExchangeCorrelator
from .const import (
    DEFAULT_CONNECTION_TIMEOUT,
    DEFAULT_HEARTBEAT_INTERVAL,
    DEFAULT_RECONNECT_DELAY,
)
from .domain.interfaces import IOperator, IRemoteCommand, IScheduler, ISocket
from .domain.value_objects import ConnectionState, SupervisorOptions
from .infrastructure.events import Listener
from .infrastructure.state_machines import (
    ConnectionSupervisor,
    HandshakeFn,
    HeartbeatFn,
)
from .infrastructure.transport import MessageHandler, WebSocketTransport

_LOGGER = logging.getLogger(__name__)


def default_options() -> SupervisorOptions:
    """Return the default timings (15s heartbeat, 2s reconnect, 15s handshake)."""
    return SupervisorOptions(
        heartbeat_interval=DEFAULT_HEARTBEAT_INTERVAL,
        reconnect_delay=DEFAULT_RECONNECT_DELAY,
        connection_timeout=DEFAULT_CONNECTION_TIMEOUT,
    )


class ManagedWebSocket(IOperator):
    """WebSocket client that reconnects forever and correlates responses.

    The caller supplies the application protocol: a handshake coroutine run
    after each transport connect, a message handler and a heartbeat sender.
    Messages are not routed to the correlator automatically; the message
    handler decides how to decode them and calls ``handle_message``.

    Attributes:
        url: WebSocket URL
        client: Opaque caller-owned object (e.g. the API client using us)

    Example:
        >>> async def on_connected() -> bool:
        ...     return await api.login()
        >>> def on_message(socket, raw):
        ...     message = json.loads(raw)
        ...     if not managed.handle_message(message):
        ...         api.handle_event(message)
        >>> managed = ManagedWebSocket(
        ...     "ws://127.0.0.1:8765/ws", on_connected, on_message,
        ...     lambda socket, interval: socket.send('{"type": "ping"}'),
        ... )
        >>> managed.activate()
        >>> result = await managed.call(IdCorrelatedCommand(build_status_request))
    """

    def __init__(
        self,
        url: str,
        on_connected: HandshakeFn,
        on_message: MessageHandler,
        send_heartbeat: HeartbeatFn,
        client: Any = None,
        options: SupervisorOptions | None = None,
        scheduler: IScheduler | None = None,
        connect: Callable[..., Any] | None = None,
    ):
        """Initialize the client (does not connect until ``activate()``).

        Args:
            url: WebSocket URL
            on_connected: Handshake; True means the connection is ready
            on_message: Called with (socket, message) for every inbound message
            send_heartbeat: Called with (socket, interval_ms) while connected
            client: Opaque object exposed as ``client``
            options: Timings (defaults to ``default_options()``)
            scheduler: Timer source (defaults to the running asyncio loop)
            connect: Connection factory passed to every WebSocketTransport
        """
        self.url = url
        self.client = client
        self._on_message = on_message
        self._connect = connect
        self._supervisor = ConnectionSupervisor(
            self._create_socket,
            on_connected,
            send_heartbeat,
            options or default_options(),
            scheduler,
        )
        self._correlator = ExchangeCorrelator(self._supervisor)

    def _create_socket(self) -> ISocket:
        _LOGGER.debug("Opening WebSocket to %s", self.url)
        return WebSocketTransport(self.url, self, self._on_message, self._connect)

    @property
    def supervisor(self) -> ConnectionSupervisor:
        return self._supervisor

    @property
    def correlator(self) -> ExchangeCorrelator:
        return self._correlator

    @property
    def websocket(self) -> ISocket | None:
        """Current socket, if any."""
        return self._supervisor.websocket

    @property
    def active(self) -> bool:
        """Whether the WebSocket is activated and running."""
        return self._supervisor.active

    @property
    def state(self) -> ConnectionState:
        """Actual state of the WebSocket connection."""
        return self._supervisor.state

    def activate(self) -> None:
        """Initiate the WebSocket connection and keep it alive."""
        self._supervisor.activate()

    def shutdown(self) -> None:
        """Stop and disconnect the WebSocket. Pending calls stay pending."""
        self._supervisor.shutdown()

    def handle_websocket_open(self) -> None:
        self._supervisor.handle_websocket_open()

    def handle_websocket_error(self, socket: ISocket) -> None:
        self._supervisor.handle_websocket_error(socket)

    def handle_websocket_closed(self, socket: ISocket) -> None:
        self._supervisor.handle_websocket_closed(socket)

    def handle_websocket_heartbeat_timeout(self) -> None:
        """Application-level heartbeat timed out. Will trigger a reconnect."""
        self._supervisor.handle_websocket_heartbeat_timeout()

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._supervisor.add_event_listener(event_type, listener)

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        self._supervisor.remove_event_listener(event_type, listener)

    def send(self, payload: Any) -> bool:
        """Send ``payload`` if connected. Returns whether it was attempted."""
        return self._correlator.send(payload)

    def call(self, command: IRemoteCommand) -> asyncio.Future:
        """Execute ``command`` and return a future for its response."""
        return self._correlator.issue(command)

    def handle_message(self, message: Any) -> bool:
        """Resolve the pending call matching ``message``.

        Returns:
            True if a call consumed the message, False if it is unsolicited
        """
        return self._correlator.try_dispatch(message)

    def __repr__(self) -> str:
        return f"ManagedWebSocket(url={self.url!r}, state={self.state})"

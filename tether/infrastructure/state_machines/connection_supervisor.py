# Copyright (c) 2026 tether Contributors
# Licensed under the MIT License

"""Connection supervisor: keeps a single socket connection alive."""

import logging
from enum import Enum, auto
from typing import Any, Awaitable, Callable, Optional

from ...domain.exceptions import AlreadyActiveError
from ...domain.interfaces import IConnectionSupervisor, IScheduler, ISocket
from ...domain.value_objects import (
    EVENT_CONNECTION_TIMEOUT,
    EVENT_STATE_CHANGE,
    ConnectionState,
    ConnectionTimeoutEvent,
    StateChangeEvent,
    SupervisorOptions,
)
from ..decorators import handle_transport_errors
from ..events import EventRegistry, Listener
from ..scheduling import AsyncioScheduler, TimerSlot

_LOGGER = logging.getLogger(__name__)

SocketFactory = Callable[[], ISocket]
HandshakeFn = Callable[[], Awaitable[bool]]
HeartbeatFn = Callable[[ISocket, float], None]

# Marks "no socket identity check requested" (None is a valid current socket)
_ANY_SOCKET: Any = object()


class ConnectionEvent(Enum):
    """Signals that drive the supervisor (used for logging)."""

    ACTIVATE = auto()
    TRANSPORT_OPEN = auto()
    HANDSHAKE_CONFIRMED = auto()
    TRANSPORT_ERROR = auto()
    TRANSPORT_CLOSED = auto()
    HEARTBEAT_TIMEOUT = auto()
    WATCHDOG_EXPIRED = auto()
    SHUTDOWN = auto()


class ConnectionSupervisor(IConnectionSupervisor):
    """State machine supervising one logical connection.

    The supervisor creates sockets through a factory, reacts to their
    lifecycle signals, runs a handshake watchdog while in LIMBO, drives
    outbound heartbeats while CONNECTED and recreates the socket after any
    failure, forever, until ``shutdown()``.

    Transitions:
        DISCONNECTED -> CONNECTING (activate)
        any active -> LIMBO (transport open)
        LIMBO -> CONNECTED (handshake confirmed, token still current)
        LIMBO -> RECONNECTING (watchdog expired)
        any active -> RECONNECTING (error/close of the current socket,
                                    heartbeat timeout)
        any -> DISCONNECTED (shutdown, or failure signal while inactive)

    Staleness guards:
        - error/close signals from a socket that is not the current one are
          dropped
        - every entry into LIMBO stamps a fresh connection token; a handshake
          result only counts if its token is still current

    Example:
        >>> supervisor = ConnectionSupervisor(
        ...     create_socket, confirm_handshake, send_heartbeat,
        ...     SupervisorOptions(15000, 2000, 15000),
        ... )
        >>> supervisor.add_event_listener("statechange", lambda e: print(e.state))
        >>> supervisor.activate()
        connecting
    """

    def __init__(
        self,
        create_socket: SocketFactory,
        on_connected: HandshakeFn,
        send_heartbeat: HeartbeatFn,
        options: SupervisorOptions,
        scheduler: Optional[IScheduler] = None,
    ):
        """Initialize supervisor in DISCONNECTED state.

        Args:
            create_socket: Factory returning a new socket; called on
                activation and on every reconnect
            on_connected: Handshake confirmation; awaited after transport
                open, True means the application connection is ready
            send_heartbeat: Called with (socket, heartbeat_interval) on each
                heartbeat tick while CONNECTED
            options: Timing configuration
            scheduler: Timer source (defaults to the running asyncio loop)
        """
        self._create_socket = create_socket
        self._on_connected = on_connected
        self._send_heartbeat = send_heartbeat
        self._options = options
        self._scheduler = scheduler or AsyncioScheduler()

        self._active = False
        self._state = ConnectionState.DISCONNECTED
        self._socket: Optional[ISocket] = None
        self._connection_token: Optional[object] = None

        self._events = EventRegistry()
        self._watchdog = TimerSlot(self._scheduler, "watchdog")
        self._heartbeat = TimerSlot(self._scheduler, "heartbeat")
        self._reconnect = TimerSlot(self._scheduler, "reconnect")

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def active(self) -> bool:
        """Whether supervision is running."""
        return self._active

    @property
    def state(self) -> ConnectionState:
        """Current connection state."""
        return self._state

    @property
    def websocket(self) -> Optional[ISocket]:
        """Currently owned socket, if any."""
        return self._socket

    @property
    def options(self) -> SupervisorOptions:
        """Timing configuration."""
        return self._options

    @property
    def is_connected(self) -> bool:
        """Check if the application connection is ready."""
        return self._state == ConnectionState.CONNECTED

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def activate(self) -> None:
        """Start supervising: create the socket and keep it alive.

        Raises:
            AlreadyActiveError: If already active
        """
        if self._active:
            raise AlreadyActiveError("Already active")

        _LOGGER.info("Activating connection supervisor")
        self._active = True
        self._transition_to(ConnectionState.CONNECTING, ConnectionEvent.ACTIVATE)
        if not self._active:
            # A listener shut down during the notification
            return
        self._heartbeat.arm(
            self._options.heartbeat_interval, self._on_heartbeat_tick, periodic=True
        )
        self._socket = self._create_socket()

    def shutdown(self) -> None:
        """Stop supervising and close the current socket.

        Safe to call repeatedly and from any state. The socket reference is
        kept, so every call closes whatever socket is currently referenced.
        """
        self._connection_token = None
        self._heartbeat.disarm()
        self._watchdog.disarm()
        self._reconnect.disarm()
        was_active = self._active
        self._active = False
        self._close_socket(self._socket)
        self._transition_to(ConnectionState.DISCONNECTED, ConnectionEvent.SHUTDOWN)
        if was_active:
            _LOGGER.info("Connection supervisor shut down")

    # ------------------------------------------------------------------
    # Transport signals
    # ------------------------------------------------------------------

    def handle_websocket_open(self) -> None:
        """Transport connected: enter LIMBO and confirm the handshake."""
        if not self._active:
            _LOGGER.debug("Ignoring transport open while inactive")
            return

        connection_token = object()
        self._connection_token = connection_token
        self._transition_to(ConnectionState.LIMBO, ConnectionEvent.TRANSPORT_OPEN)
        self._scheduler.spawn(self._confirm_handshake(connection_token))

    def handle_websocket_error(self, socket: ISocket) -> None:
        """Transport error on ``socket``; reconnects if it is the current one."""
        self._reconnect_if_needed(socket, ConnectionEvent.TRANSPORT_ERROR)

    def handle_websocket_closed(self, socket: ISocket) -> None:
        """Transport closed on ``socket``; reconnects if it is the current one."""
        self._reconnect_if_needed(socket, ConnectionEvent.TRANSPORT_CLOSED)

    def handle_websocket_heartbeat_timeout(self) -> None:
        """Application-level heartbeat timed out. Will trigger a reconnect."""
        self._reconnect_if_needed(_ANY_SOCKET, ConnectionEvent.HEARTBEAT_TIMEOUT)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        """Subscribe to "statechange" or "connectiontimeout"."""
        self._events.add_listener(event_type, listener)

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        """Unsubscribe a listener added with ``add_event_listener``."""
        self._events.remove_listener(event_type, listener)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _confirm_handshake(self, connection_token: object) -> None:
        success = await self._run_handshake()

        if self._connection_token is not connection_token:
            _LOGGER.debug("Dropping stale handshake result (%s)", success)
            return

        if success:
            self._transition_to(
                ConnectionState.CONNECTED, ConnectionEvent.HANDSHAKE_CONFIRMED
            )
            _LOGGER.info("Connection established")
        else:
            _LOGGER.warning(
                "Handshake not confirmed, waiting for watchdog (%sms)",
                self._options.connection_timeout,
            )

    @handle_transport_errors(
        "Handshake confirmation", logger=_LOGGER, reraise=False, default_return=False
    )
    async def _run_handshake(self) -> bool:
        return bool(await self._on_connected())

    def _on_watchdog_expired(self) -> None:
        _LOGGER.warning(
            "Handshake did not complete within %sms", self._options.connection_timeout
        )
        self._events.dispatch(EVENT_CONNECTION_TIMEOUT, ConnectionTimeoutEvent.create())
        self._reconnect_if_needed(_ANY_SOCKET, ConnectionEvent.WATCHDOG_EXPIRED)

    def _on_heartbeat_tick(self) -> None:
        if (
            not self._active
            or self._state != ConnectionState.CONNECTED
            or self._socket is None
        ):
            return
        self._emit_heartbeat(self._socket, self._options.heartbeat_interval)

    @handle_transport_errors("Heartbeat send", logger=_LOGGER, reraise=False)
    def _emit_heartbeat(self, socket: ISocket, interval: float) -> None:
        self._send_heartbeat(socket, interval)

    def _on_reconnect_timer(self) -> None:
        if not self._active or self._socket is not None:
            return
        _LOGGER.debug("Creating replacement socket")
        self._socket = self._create_socket()

    def _reconnect_if_needed(self, source: Any, event: ConnectionEvent) -> None:
        """Reconnect procedure.

        Args:
            source: Socket the signal came from, or ``_ANY_SOCKET`` to skip
                the identity check
            event: Signal being handled
        """
        if source is not _ANY_SOCKET and source is not self._socket:
            _LOGGER.debug("Ignoring %s from stale socket", event.name)
            return

        self._connection_token = None
        if not self._active:
            self._transition_to(ConnectionState.DISCONNECTED, event)
            return

        if event in (ConnectionEvent.TRANSPORT_ERROR, ConnectionEvent.TRANSPORT_CLOSED):
            _LOGGER.warning(
                "Connection lost (%s), reconnecting in %sms",
                event.name,
                self._options.reconnect_delay,
            )

        self._transition_to(ConnectionState.RECONNECTING, event)
        self._watchdog.disarm()
        # Detach first: a close signal raised by close() is then stale
        socket, self._socket = self._socket, None
        self._close_socket(socket)

        self._reconnect.arm(self._options.reconnect_delay, self._on_reconnect_timer)

    @handle_transport_errors("Socket close", logger=_LOGGER, reraise=False)
    def _close_socket(self, socket: Optional[ISocket]) -> None:
        if socket is not None:
            socket.close()

    def _transition_to(self, new_state: ConnectionState, event: ConnectionEvent) -> None:
        """Change state and notify listeners. Same-state transitions are no-ops."""
        if self._state == new_state:
            return

        previous_state = self._state
        self._state = new_state

        if new_state == ConnectionState.LIMBO:
            self._watchdog.arm(self._options.connection_timeout, self._on_watchdog_expired)
        else:
            self._watchdog.disarm()

        _LOGGER.debug(
            "Connection state: %s -> %s (event: %s)",
            previous_state.name,
            new_state.name,
            event.name,
        )

        self._events.dispatch(
            EVENT_STATE_CHANGE, StateChangeEvent.create(new_state, previous_state)
        )

    def __str__(self) -> str:
        """String representation."""
        return f"ConnectionSupervisor(state={self._state.name})"

    def __repr__(self) -> str:
        """Developer representation."""
        return (
            f"ConnectionSupervisor(state={self._state!r}, active={self._active}, "
            f"socket={self._socket!r})"
        )

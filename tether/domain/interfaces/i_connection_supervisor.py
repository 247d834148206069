"""IConnectionSupervisor interface for connection lifecycle management."""

from abc import abstractmethod
from typing import Optional

from ..value_objects import ConnectionState
from .i_operator import IOperator
from .i_socket import ISocket


class IConnectionSupervisor(IOperator):
    """Interface for keeping a single connection alive.

    The supervisor adds connection policy on top of a bare socket:
    - Automatic reconnection on failure, forever, at a fixed delay
    - Application handshake with a timeout watchdog
    - Periodic outbound heartbeats
    - State tracking and change notification

    The correlation layer depends on this interface only for ``state`` and
    ``websocket``.

    Example:
        >>> supervisor = ConnectionSupervisor(factory, handshake, heartbeat, options)
        >>> supervisor.activate()
        >>> supervisor.state
        <ConnectionState.CONNECTING: 'connecting'>
    """

    @abstractmethod
    def activate(self) -> None:
        """Start supervising: create a socket and keep it alive.

        Raises:
            AlreadyActiveError: If already active
        """

    @abstractmethod
    def shutdown(self) -> None:
        """Stop supervising and close the current socket. Idempotent."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """Whether supervision is running."""

    @property
    @abstractmethod
    def state(self) -> ConnectionState:
        """Current connection state."""

    @property
    @abstractmethod
    def websocket(self) -> Optional[ISocket]:
        """Currently owned socket, if any."""

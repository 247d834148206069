"""IOperator interface for receiving transport lifecycle signals."""

from abc import ABC, abstractmethod

from .i_socket import ISocket


class IOperator(ABC):
    """Receiver of socket lifecycle signals.

    Transport adapters call these operations; the supervisor (and the facade
    that wraps it) implement them. Error and close signals carry the socket
    they originate from so that signals from superseded sockets can be
    recognised and dropped.
    """

    @abstractmethod
    def handle_websocket_open(self) -> None:
        """Transport-level connection established."""

    @abstractmethod
    def handle_websocket_error(self, socket: ISocket) -> None:
        """Transport reported an error.

        Args:
            socket: Socket the error originates from
        """

    @abstractmethod
    def handle_websocket_closed(self, socket: ISocket) -> None:
        """Transport was closed.

        Args:
            socket: Socket that closed
        """

    @abstractmethod
    def handle_websocket_heartbeat_timeout(self) -> None:
        """Application-level heartbeat timed out. Triggers a reconnect."""

"""ISocket interface for transport socket implementations."""

from abc import ABC, abstractmethod
from typing import Any


class ISocket(ABC):
    """Interface for the transport socket a supervisor owns.

    The socket is created by a caller-supplied factory and reports its
    lifecycle (open, error, close) through an ``IOperator``. The supervisor
    never mutates a socket; it only writes to it and closes it.

    Connection lifecycle:
        1. factory() → socket starts connecting
        2. operator.handle_websocket_open() once the transport is up
        3. send(payload) → zero or more writes
        4. close() → transport torn down

    Example:
        >>> socket = factory()
        >>> socket.send('{"type": "hb"}')
        >>> socket.close()
    """

    @abstractmethod
    def send(self, payload: Any) -> None:
        """Write a payload to the transport.

        Delivery is not guaranteed; this is fire-and-forget.

        Args:
            payload: Data to write (text or bytes, encoding is the caller's)

        Raises:
            TransportError: If the socket cannot accept writes
        """

    @abstractmethod
    def close(self) -> None:
        """Close the transport.

        This method should be idempotent (safe to call multiple times).
        """

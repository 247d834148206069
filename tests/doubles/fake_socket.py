"""Fake socket for testing without a network.

This fake implements the ISocket interface for testing.
"""

from typing import Any, List, Optional

from tether.domain.interfaces import ISocket


class FakeSocket(ISocket):
    """In-memory socket that records what was sent and closed.

    Lifecycle signals are not generated by the fake; tests call the
    supervisor's ``handle_websocket_*`` methods with the fake instead.

    Attributes:
        sent: Payloads passed to send()
        close_count: Number of close() calls
        send_error: Exception raised by send() when set
        close_error: Exception raised by close() when set

    Example:
        >>> socket = FakeSocket()
        >>> socket.send("ping")
        >>> socket.sent
        ['ping']
    """

    def __init__(
        self,
        send_error: Optional[Exception] = None,
        close_error: Optional[Exception] = None,
    ):
        """Initialize fake socket."""
        self.sent: List[Any] = []
        self.close_count = 0
        self.send_error = send_error
        self.close_error = close_error

    @property
    def closed(self) -> bool:
        return self.close_count > 0

    def send(self, payload: Any) -> None:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(payload)

    def close(self) -> None:
        self.close_count += 1
        if self.close_error is not None:
            raise self.close_error

"""ConnectionState value object.

Represents the lifecycle state of a supervised connection.
"""

from enum import Enum


class ConnectionState(str, Enum):
    """Supervised connection states.

    Exactly one state is current at any instant.

    State Transitions:
        DISCONNECTED → CONNECTING (activate)
        CONNECTING/RECONNECTING → LIMBO (transport open)
        LIMBO → CONNECTED (handshake confirmed)
        any active state → RECONNECTING (error, close, timeout)
        any state → DISCONNECTED (shutdown, or failure while inactive)
    """

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    LIMBO = "limbo"
    CONNECTED = "connected"
    RECONNECTING = "reconnecting"

    @property
    def is_usable(self) -> bool:
        """Check if payloads may be written in this state.

        Example:
            >>> ConnectionState.CONNECTED.is_usable
            True
            >>> ConnectionState.LIMBO.is_usable
            False
        """
        return self is ConnectionState.CONNECTED

    def __str__(self) -> str:
        return self.value

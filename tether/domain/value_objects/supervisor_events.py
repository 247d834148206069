"""Supervisor notification events.

Event names are the keys of the supervisor's observer registry.
"""

from dataclasses import dataclass
from typing import Optional

from .connection_state import ConnectionState

EVENT_STATE_CHANGE = "statechange"
EVENT_CONNECTION_TIMEOUT = "connectiontimeout"


@dataclass(frozen=True)
class SupervisorEvent:
    """Base notification delivered to listeners."""

    type: str


@dataclass(frozen=True)
class StateChangeEvent(SupervisorEvent):
    """Emitted once per real state transition.

    Attributes:
        state: The new state
        previous: The state that was left
    """

    state: ConnectionState = ConnectionState.DISCONNECTED
    previous: Optional[ConnectionState] = None

    @classmethod
    def create(
        cls, state: ConnectionState, previous: Optional[ConnectionState] = None
    ) -> "StateChangeEvent":
        """Build a state change event for ``state``."""
        return cls(type=EVENT_STATE_CHANGE, state=state, previous=previous)


@dataclass(frozen=True)
class ConnectionTimeoutEvent(SupervisorEvent):
    """Emitted when the handshake watchdog fires. Carries no payload."""

    @classmethod
    def create(cls) -> "ConnectionTimeoutEvent":
        return cls(type=EVENT_CONNECTION_TIMEOUT)

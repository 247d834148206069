"""Value Objects for the tether domain.

Value Objects are small domain primitives that:
- Are immutable where they describe configuration or notifications
- Validate their invariants at construction
- Give names to values that would otherwise be bare strings and numbers
"""

from .connection_state import ConnectionState
from .supervisor_options import SupervisorOptions
from .pending_exchange import PendingExchange
from .supervisor_events import (
    EVENT_CONNECTION_TIMEOUT,
    EVENT_STATE_CHANGE,
    ConnectionTimeoutEvent,
    StateChangeEvent,
    SupervisorEvent,
)

__all__ = [
    "ConnectionState",
    "SupervisorOptions",
    "PendingExchange",
    "SupervisorEvent",
    "StateChangeEvent",
    "ConnectionTimeoutEvent",
    "EVENT_STATE_CHANGE",
    "EVENT_CONNECTION_TIMEOUT",
]

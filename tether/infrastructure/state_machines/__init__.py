"""State machines for managing connection lifecycle."""

from .connection_supervisor import (
    ConnectionEvent,
    ConnectionSupervisor,
    HandshakeFn,
    HeartbeatFn,
    SocketFactory,
)

__all__ = [
    "ConnectionSupervisor",
    "ConnectionEvent",
    "SocketFactory",
    "HandshakeFn",
    "HeartbeatFn",
]

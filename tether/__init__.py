# Copyright (c) 2026 tether Contributors
# Licensed under the MIT License

"""tether: keep a single WebSocket connection alive and correlate its responses.

The package supervises one logical connection over an unreliable transport
socket: it reconnects after failures, confirms an application handshake
within a timeout, drives outbound heartbeats and matches inbound messages
with outstanding requests.
"""

from __future__ import annotations

from .application.commands import CallbackCommand, IdCorrelatedCommand
from .application.services import ExchangeCorrelator
from .client import ManagedWebSocket, default_options
from .config_loader import load_supervisor_options, options_from_dict
from .domain.exceptions import (
    AlreadyActiveError,
    ConfigurationError,
    ExchangeAbandonedError,
    TetherError,
    TransportError,
)
from .domain.interfaces import IOperator, IRemoteCommand, IScheduler, ISocket
from .domain.value_objects import (
    EVENT_CONNECTION_TIMEOUT,
    EVENT_STATE_CHANGE,
    ConnectionState,
    ConnectionTimeoutEvent,
    StateChangeEvent,
    SupervisorOptions,
)
from .infrastructure.scheduling import AsyncioScheduler
from .infrastructure.state_machines import ConnectionSupervisor
from .infrastructure.transport import WebSocketTransport

__version__ = "1.0.0"

__all__ = [
    "AlreadyActiveError",
    "AsyncioScheduler",
    "CallbackCommand",
    "ConfigurationError",
    "ConnectionState",
    "ConnectionSupervisor",
    "ConnectionTimeoutEvent",
    "EVENT_CONNECTION_TIMEOUT",
    "EVENT_STATE_CHANGE",
    "ExchangeAbandonedError",
    "ExchangeCorrelator",
    "IOperator",
    "IRemoteCommand",
    "IScheduler",
    "ISocket",
    "IdCorrelatedCommand",
    "ManagedWebSocket",
    "StateChangeEvent",
    "SupervisorOptions",
    "TetherError",
    "TransportError",
    "WebSocketTransport",
    "default_options",
    "load_supervisor_options",
    "options_from_dict",
]

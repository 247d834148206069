"""Domain interfaces for tether.

This module defines the contracts (interfaces) that infrastructure
implementations must fulfill. Using these interfaces enables:
- Dependency Inversion: the supervisor never imports a concrete socket
- Testability: fakes replace sockets, schedulers and commands in tests
- Flexibility: any transport with open/error/close/message semantics fits
"""

from .i_socket import ISocket
from .i_operator import IOperator
from .i_connection_supervisor import IConnectionSupervisor
from .i_remote_command import IRemoteCommand, ResponseMatcher
from .i_scheduler import IScheduler, ITimerHandle

__all__ = [
    "ISocket",
    "IOperator",
    "IConnectionSupervisor",
    "IRemoteCommand",
    "ResponseMatcher",
    "IScheduler",
    "ITimerHandle",
]

"""Ready-made IRemoteCommand implementations."""

from .callback_command import CallbackCommand
from .id_correlated_command import IdCorrelatedCommand

__all__ = [
    "CallbackCommand",
    "IdCorrelatedCommand",
]

"""Transport implementations.

This module contains implementations of the ISocket interface that wire a
real network connection to a connection supervisor.
"""

from .websocket_transport import MessageHandler, WebSocketTransport

__all__ = [
    "WebSocketTransport",
    "MessageHandler",
]

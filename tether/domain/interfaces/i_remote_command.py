"""IRemoteCommand interface for correlated request/response commands."""

from abc import ABC, abstractmethod
from typing import Any, Callable

# (message, exchange_id) -> bool
ResponseMatcher = Callable[[Any, str], bool]


class IRemoteCommand(ABC):
    """A request sent over the supervised socket that expects a response.

    Commands decide everything about the wire: what to send, how to spot
    their response among inbound messages, and what to hand back to the
    caller. The correlator only sequences these three operations.

    Example:
        >>> class Ping(IRemoteCommand):
        ...     def execute(self, channel):
        ...         channel.send('{"id": "1", "type": "ping"}')
        ...         return "1"
        ...     def response_matches(self, message):
        ...         return message.get("id") == "1"
        ...     def handle_response(self, message):
        ...         return message["body"]
    """

    @abstractmethod
    def execute(self, channel: Any) -> str:
        """Send the request.

        Args:
            channel: Object offering ``send(payload) -> bool``

        Returns:
            Identifier of the exchange
        """

    @abstractmethod
    def response_matches(self, message: Any) -> bool:
        """Check whether an inbound message answers this command."""

    @abstractmethod
    def handle_response(self, message: Any) -> Any:
        """Transform the matching message into the command's result."""

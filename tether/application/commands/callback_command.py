"""Command assembled from plain callables."""

from typing import Any, Callable, Optional

from ...domain.interfaces import IRemoteCommand, ResponseMatcher


class CallbackCommand(IRemoteCommand):
    """Adapts three functions to the IRemoteCommand interface.

    The matcher receives the message and the id returned by ``execute_fn``.

    Example:
        >>> def ask_status(channel):
        ...     channel.send("status?")
        ...     return "status"
        >>> command = CallbackCommand(
        ...     execute_fn=ask_status,
        ...     match_fn=lambda message, rpc_id: message.startswith(rpc_id),
        ...     response_fn=lambda message: message.split(":", 1)[1],
        ... )
    """

    def __init__(
        self,
        execute_fn: Callable[[Any], str],
        match_fn: ResponseMatcher,
        response_fn: Optional[Callable[[Any], Any]] = None,
    ):
        self._execute_fn = execute_fn
        self._match_fn = match_fn
        self._response_fn = response_fn
        self.exchange_id: Optional[str] = None

    def execute(self, channel: Any) -> str:
        self.exchange_id = self._execute_fn(channel)
        return self.exchange_id

    def response_matches(self, message: Any) -> bool:
        return bool(self._match_fn(message, self.exchange_id))

    def handle_response(self, message: Any) -> Any:
        if self._response_fn is None:
            return message
        return self._response_fn(message)

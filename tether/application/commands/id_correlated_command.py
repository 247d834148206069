"""Command correlated by a generated message id."""

import uuid
from typing import Any, Callable, Mapping, Optional

from ...domain.interfaces import IRemoteCommand


class IdCorrelatedCommand(IRemoteCommand):
    """Command whose response carries the request's id.

    A fresh uuid4 hex id is generated per command; the payload builder
    receives it and returns what to send. The response is the first mapping
    message whose ``id_key`` equals that id.

    Attributes:
        rpc_id: Generated correlation id
        sent: Whether the channel accepted the payload

    Example:
        >>> command = IdCorrelatedCommand(
        ...     lambda rpc_id: json.dumps({"id": rpc_id, "method": "status"}),
        ...     transform=lambda message: message["result"],
        ... )
        >>> future = correlator.issue(command)
    """

    def __init__(
        self,
        build_payload: Callable[[str], Any],
        id_key: str = "id",
        transform: Optional[Callable[[Any], Any]] = None,
        rpc_id: Optional[str] = None,
    ):
        """Initialize command.

        Args:
            build_payload: Builds the wire payload from the correlation id
            id_key: Key holding the id in response messages
            transform: Maps the response message to the result
                (defaults to returning the message itself)
            rpc_id: Explicit correlation id (defaults to a new uuid4 hex)
        """
        self.rpc_id = rpc_id or uuid.uuid4().hex
        self.id_key = id_key
        self.sent = False
        self._build_payload = build_payload
        self._transform = transform

    def execute(self, channel: Any) -> str:
        self.sent = bool(channel.send(self._build_payload(self.rpc_id)))
        return self.rpc_id

    def response_matches(self, message: Any) -> bool:
        return isinstance(message, Mapping) and message.get(self.id_key) == self.rpc_id

    def handle_response(self, message: Any) -> Any:
        if self._transform is None:
            return message
        return self._transform(message)

    def __repr__(self) -> str:
        return f"IdCorrelatedCommand(rpc_id={self.rpc_id!r})"

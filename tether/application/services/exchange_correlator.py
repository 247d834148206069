"""ExchangeCorrelator for request/response matching over a supervised socket.

This service tracks in-flight request/response exchanges. It handles:
- Issuing commands and handing out completion futures
- Matching inbound messages against pending exchanges, oldest first
- Fire-and-forget writes gated on the supervisor being CONNECTED

No timeout is applied here: an exchange whose response never arrives stays
pending until the caller abandons it.
"""

import asyncio
import logging
import time
from typing import Any, List, Optional

from ...domain.exceptions import ExchangeAbandonedError
from ...domain.interfaces import IConnectionSupervisor, IRemoteCommand
from ...domain.value_objects import PendingExchange
from ...infrastructure.decorators import handle_transport_errors

_LOGGER = logging.getLogger(__name__)


class ExchangeCorrelator:
    """Service correlating outgoing commands with inbound responses.

    The correlator only reads the supervisor (state and current socket); it
    never changes the connection. Exchanges survive reconnects, so commands
    must use identifiers that stay meaningful on a new socket.

    Responsibilities:
    - Queue pending exchanges in issuance order
    - Resolve the first exchange whose command matches a message
    - Report unmatched messages so the caller can treat them as events

    Example:
        >>> correlator = ExchangeCorrelator(supervisor)
        >>> future = correlator.issue(IdCorrelatedCommand(lambda rpc_id: {...}))
        >>> correlator.try_dispatch({"id": rpc_id, "result": 42})
        True
        >>> await future
        {'id': ..., 'result': 42}
    """

    def __init__(self, supervisor: IConnectionSupervisor):
        """Initialize correlator.

        Args:
            supervisor: Supervisor owning the socket commands are sent over
        """
        self._supervisor = supervisor
        self._pending: List[PendingExchange] = []

    @property
    def pending_count(self) -> int:
        """Number of exchanges awaiting a response."""
        return len(self._pending)

    @property
    def pending(self) -> List[PendingExchange]:
        """Snapshot of pending exchanges, oldest first."""
        return list(self._pending)

    def issue(self, command: IRemoteCommand) -> asyncio.Future:
        """Send a command and track its response.

        The exchange is queued before ``execute`` runs, so a response that is
        dispatched while the command is still sending is matched too.

        Args:
            command: Command to execute

        Returns:
            Future resolved with ``command.handle_response(message)``, or
            rejected with the exception ``execute`` raised

        Example:
            >>> future = correlator.issue(command)
            >>> result = await future
        """
        future = asyncio.get_running_loop().create_future()
        exchange = PendingExchange(command=command, future=future)
        self._pending.append(exchange)

        try:
            exchange.exchange_id = command.execute(self)
        except Exception as err:
            _LOGGER.error(
                "Command %s failed to execute: %s", type(command).__name__, err
            )
            self._remove(exchange)
            exchange.reject(err)
            return future

        _LOGGER.debug(
            "Issued %s (id=%s, pending=%d)",
            type(command).__name__,
            exchange.exchange_id,
            len(self._pending),
        )
        return future

    def try_dispatch(self, message: Any) -> bool:
        """Resolve the first pending exchange matching ``message``.

        Args:
            message: Inbound message, in whatever form the commands expect

        Returns:
            True if an exchange consumed the message, False if the message is
            unsolicited (nothing is changed in that case)
        """
        exchange = self._find_match(message)
        if exchange is None:
            return False

        self._remove(exchange)

        if exchange.future.cancelled():
            _LOGGER.debug(
                "Response for cancelled %s (id=%s) dropped",
                type(exchange.command).__name__,
                exchange.exchange_id,
            )
            return True

        try:
            result = exchange.command.handle_response(message)
        except Exception as err:
            _LOGGER.error(
                "Command %s failed to handle its response: %s",
                type(exchange.command).__name__,
                err,
            )
            exchange.reject(err)
            return True

        exchange.resolve(result)
        _LOGGER.debug(
            "Command %s completed in %.0f ms",
            type(exchange.command).__name__,
            exchange.elapsed_ms(time.time()),
        )
        return True

    def send(self, payload: Any) -> bool:
        """Write ``payload`` to the current socket if the supervisor is CONNECTED.

        Unsent payloads are not queued or retried; a failing write is logged
        and otherwise ignored.

        Returns:
            True if the write was attempted
        """
        socket = self._supervisor.websocket
        if not self._supervisor.state.is_usable or socket is None:
            _LOGGER.debug(
                "Not sending payload in state %s", self._supervisor.state.name
            )
            return False

        self._write(socket, payload)
        return True

    @handle_transport_errors("Payload send", logger=_LOGGER, reraise=False)
    def _write(self, socket: Any, payload: Any) -> None:
        socket.send(payload)

    def abandon_all(self, reason: str = "abandoned") -> int:
        """Reject every pending exchange with ExchangeAbandonedError.

        Args:
            reason: Message attached to the error

        Returns:
            Number of exchanges rejected
        """
        pending, self._pending = self._pending, []
        count = 0
        for exchange in pending:
            if exchange.reject(ExchangeAbandonedError(reason)):
                count += 1
        if pending:
            _LOGGER.info("Abandoned %d pending exchanges: %s", count, reason)
        return count

    def _find_match(self, message: Any) -> Optional[PendingExchange]:
        for exchange in self._pending:
            if exchange.command.response_matches(message):
                return exchange
        return None

    def _remove(self, exchange: PendingExchange) -> None:
        self._pending = [entry for entry in self._pending if entry is not exchange]

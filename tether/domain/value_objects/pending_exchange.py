"""PendingExchange record.

One outstanding request awaiting a correlated response.
"""

import asyncio
import time
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class PendingExchange:
    """In-flight request/response exchange.

    Identity-compared (``eq=False``): two exchanges for equal commands are
    still distinct entries in the pending queue.

    Attributes:
        command: The issued command (an ``IRemoteCommand``)
        future: Completion handle, resolved or rejected exactly once
        issued_at: Unix timestamp of issuance
        exchange_id: Identifier returned by the command's ``execute``
    """

    command: Any
    future: asyncio.Future
    issued_at: float = field(default_factory=time.time)
    exchange_id: Optional[str] = None

    @property
    def is_settled(self) -> bool:
        """Check if the completion handle already holds a result or was cancelled."""
        return self.future.done()

    def elapsed_ms(self, now: Optional[float] = None) -> float:
        """Milliseconds since issuance."""
        return ((now if now is not None else time.time()) - self.issued_at) * 1000

    def resolve(self, result: Any) -> bool:
        """Resolve the completion handle.

        Returns:
            True if the handle was still open
        """
        if self.future.done():
            return False
        self.future.set_result(result)
        return True

    def reject(self, error: BaseException) -> bool:
        """Reject the completion handle.

        Returns:
            True if the handle was still open
        """
        if self.future.done():
            return False
        self.future.set_exception(error)
        return True

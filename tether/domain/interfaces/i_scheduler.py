"""IScheduler interface for timers and background work."""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Protocol


class ITimerHandle(Protocol):
    """Handle of a scheduled callback."""

    def cancel(self) -> None:
        """Prevent the callback from running. Safe after it already ran."""


class IScheduler(ABC):
    """Source of timers and background tasks for a supervisor.

    Keeping this behind an interface lets tests advance time by hand
    instead of sleeping.
    """

    @abstractmethod
    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ITimerHandle:
        """Run ``callback`` once after ``delay_ms`` milliseconds.

        Returns:
            Handle whose ``cancel()`` prevents the call
        """

    @abstractmethod
    def spawn(self, coro: Awaitable[Any]) -> Any:
        """Run a coroutine in the background without awaiting it."""

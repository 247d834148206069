"""Single-slot timer holder."""

import logging
from typing import Callable, Optional

from ...domain.interfaces import IScheduler, ITimerHandle

_LOGGER = logging.getLogger(__name__)


class TimerSlot:
    """Owns at most one pending timer of a given kind.

    Arming a slot cancels whatever it held before, so a timer kind can never
    be pending twice. A periodic slot re-arms itself before running its
    callback and stays armed until ``disarm()``.

    Attributes:
        name: Timer kind, used in log messages

    Example:
        >>> watchdog = TimerSlot(scheduler, "watchdog")
        >>> watchdog.arm(15000, on_timeout)
        >>> watchdog.armed
        True
        >>> watchdog.disarm()
        >>> watchdog.armed
        False
    """

    def __init__(self, scheduler: IScheduler, name: str):
        self._scheduler = scheduler
        self.name = name
        self._handle: Optional[ITimerHandle] = None
        self._generation = 0

    @property
    def armed(self) -> bool:
        """Whether a timer is pending in this slot."""
        return self._handle is not None

    def arm(
        self, delay_ms: float, callback: Callable[[], None], periodic: bool = False
    ) -> None:
        """Schedule ``callback`` after ``delay_ms``, replacing any pending timer.

        Args:
            delay_ms: Delay (or period) in milliseconds
            callback: Function to run when the timer fires
            periodic: Keep firing every ``delay_ms`` until disarmed
        """
        self.disarm()
        self._generation += 1
        generation = self._generation

        def fire() -> None:
            if generation != self._generation:
                return
            if periodic:
                self._handle = self._scheduler.call_later(delay_ms, fire)
            else:
                self._handle = None
            callback()

        self._handle = self._scheduler.call_later(delay_ms, fire)
        _LOGGER.debug("Armed %s timer (%sms, periodic=%s)", self.name, delay_ms, periodic)

    def disarm(self) -> None:
        """Cancel the pending timer, if any. Idempotent."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        self._generation += 1
        _LOGGER.debug("Disarmed %s timer", self.name)

    def __repr__(self) -> str:
        return f"TimerSlot(name={self.name!r}, armed={self.armed})"

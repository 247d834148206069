"""Timer and task scheduling."""

from .asyncio_scheduler import AsyncioScheduler
from .timer_slot import TimerSlot

__all__ = [
    "AsyncioScheduler",
    "TimerSlot",
]

"""asyncio-backed scheduler."""

import asyncio
from typing import Any, Awaitable, Callable, Optional, Set

from ...domain.interfaces import IScheduler


class AsyncioScheduler(IScheduler):
    """Schedules timers and tasks on an asyncio event loop.

    The loop is resolved lazily: when none is given, the running loop at the
    time of the first call is used. Supervisor operations must therefore be
    called from inside the loop.

    Example:
        >>> scheduler = AsyncioScheduler()
        >>> handle = scheduler.call_later(2000, lambda: print("tick"))
        >>> handle.cancel()
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        """Initialize scheduler.

        Args:
            loop: Event loop to use (defaults to the running loop)
        """
        self._loop = loop
        self._tasks: Set[asyncio.Task] = set()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay_ms / 1000, callback)

    def spawn(self, coro: Awaitable[Any]) -> asyncio.Task:
        task = self.loop.create_task(coro)
        # The loop only keeps weak references to tasks
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

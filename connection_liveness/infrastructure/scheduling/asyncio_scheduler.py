"""Scheduler backed by the asyncio event loop."""

import asyncio
import logging
from typing import Callable, Optional

from ...domain.interfaces import IScheduler, ITimerHandle

_LOGGER = logging.getLogger(__name__)


class AsyncioTimerHandle(ITimerHandle):
    """Wraps ``asyncio.TimerHandle`` behind the ``ITimerHandle`` contract."""

    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()

    @property
    def cancelled(self) -> bool:
        return self._handle.cancelled()

    @property
    def when(self) -> float:
        """Loop time at which the callback is due."""
        return self._handle.when()


class AsyncioScheduler(IScheduler):
    """Schedules one-shot callbacks with ``loop.call_later``.

    Callbacks run on the event loop thread, serialized with every other
    callback on that loop, so the monitor needs no locking.

    Attributes:
        _loop: Event loop to schedule on, or None to use the running loop

    Example:
        >>> async def main():
        ...     scheduler = AsyncioScheduler()
        ...     scheduler.call_later(0.2, lambda: print("fired"))
        ...     await asyncio.sleep(0.3)
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        """Initialize scheduler.

        Args:
            loop: Event loop to use. When omitted, the running loop is looked
                up on every call, so the scheduler can be created before the
                loop starts.
        """
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """Get the event loop callbacks are scheduled on.

        Raises:
            RuntimeError: If no loop was given and none is running
        """
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> AsyncioTimerHandle:
        """Run ``callback`` once after ``delay`` seconds."""
        _LOGGER.debug(
            "Scheduling %s in %.3fs", getattr(callback, "__name__", callback), delay
        )
        return AsyncioTimerHandle(self.loop.call_later(max(delay, 0.0), callback))

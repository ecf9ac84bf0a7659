"""IScheduler interface for one-shot timers."""

from abc import ABC, abstractmethod
from typing import Callable


class ITimerHandle(ABC):
    """Handle to a scheduled one-shot callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel the callback if it has not run yet.

        This method should be idempotent (safe to call multiple times).
        """


class IScheduler(ABC):
    """Interface for scheduling one-shot callbacks.

    Only one-shot timers are offered: a periodic timer cannot express an
    interval that changes on every cycle.

    Example:
        >>> scheduler = AsyncioScheduler()
        >>> handle = scheduler.call_later(6.0, check)
        >>> handle.cancel()
    """

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ITimerHandle:
        """Run ``callback`` once after ``delay`` seconds.

        Args:
            delay: Delay in seconds (best effort, not precise)
            callback: Function to call (no args)

        Returns:
            Handle used to cancel the callback
        """

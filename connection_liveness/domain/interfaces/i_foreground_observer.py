"""IForegroundObserver interface for host lifecycle notifications."""

from abc import ABC, abstractmethod
from typing import Callable


class ISubscriptionHandle(ABC):
    """Handle returned by ``IForegroundObserver.subscribe``."""

    @abstractmethod
    def unsubscribe(self) -> None:
        """Stop receiving notifications.

        This method should be idempotent (safe to call multiple times).
        """


class IForegroundObserver(ABC):
    """Interface for observing foreground/background transitions of the host.

    Hosts that can be suspended or hidden (mobile bridges, desktop shells,
    processes stopped by job control) report when they become active again,
    so the monitor can re-check the connection without waiting for the next
    poll.

    Example:
        >>> observer = ManualForegroundObserver()
        >>> handle = observer.subscribe(lambda: print(observer.is_foreground))
        >>> observer.set_foreground(False)
        False
        >>> handle.unsubscribe()
    """

    @abstractmethod
    def subscribe(self, on_change: Callable[[], None]) -> ISubscriptionHandle:
        """Register a callback invoked on every foreground state change.

        Args:
            on_change: Called with no arguments; read ``is_foreground``
                to learn the new state

        Returns:
            Handle used to unsubscribe
        """

    @property
    @abstractmethod
    def is_foreground(self) -> bool:
        """Check if the host is currently in the foreground.

        Returns:
            True if the host is active/visible
        """

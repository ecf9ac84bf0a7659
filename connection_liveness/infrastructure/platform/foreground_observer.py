"""Foreground observers and the feature-detecting factory."""

import asyncio
import logging
import signal
import threading
import weakref
from typing import Callable, List, Optional

from ...domain.interfaces import IForegroundObserver, ISubscriptionHandle

_LOGGER = logging.getLogger(__name__)

# One SIGCONT handler per loop; a second add_signal_handler would replace the first
_SIGNAL_OBSERVERS: "weakref.WeakKeyDictionary" = weakref.WeakKeyDictionary()


class CallbackHandle(ISubscriptionHandle):
    """Removes one callback from its observer."""

    def __init__(self, observer: "NotifyingForegroundObserver", callback: Callable[[], None]):
        self._observer = observer
        self._callback: Optional[Callable[[], None]] = callback

    def unsubscribe(self) -> None:
        if self._callback is None:
            return
        self._observer._remove_subscriber(self._callback)
        self._callback = None

    @property
    def active(self) -> bool:
        return self._callback is not None


class _NoopHandle(ISubscriptionHandle):
    def unsubscribe(self) -> None:
        pass


class InertForegroundObserver(IForegroundObserver):
    """Observer for hosts without lifecycle notifications.

    Always reports the foreground and never notifies, so the monitor relies
    on its poll timer alone.
    """

    def subscribe(self, on_change: Callable[[], None]) -> ISubscriptionHandle:
        return _NoopHandle()

    @property
    def is_foreground(self) -> bool:
        return True


class NotifyingForegroundObserver(IForegroundObserver):
    """Base class for observers that fan out change notifications.

    Subscribers are called in subscription order. A failing subscriber is
    logged and does not prevent the others from being notified.

    Subclasses that hold an OS resource acquire it in ``_first_subscribed``
    and release it in ``_last_unsubscribed``.
    """

    def __init__(self):
        self._subscribers: List[Callable[[], None]] = []

    def subscribe(self, on_change: Callable[[], None]) -> CallbackHandle:
        self._subscribers.append(on_change)
        if len(self._subscribers) == 1:
            self._first_subscribed()
        return CallbackHandle(self, on_change)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _remove_subscriber(self, callback: Callable[[], None]) -> None:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            return  # Already removed by the observer
        if not self._subscribers:
            self._last_unsubscribed()

    def _first_subscribed(self) -> None:
        pass

    def _last_unsubscribed(self) -> None:
        pass

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback()
            except Exception as err:
                _LOGGER.error("Error in foreground change callback: %s", err, exc_info=True)


class ManualForegroundObserver(NotifyingForegroundObserver):
    """Observer driven by the host application.

    For hosts that learn about visibility through their own toolkit
    (GUI frameworks, mobile bridges), which report it via
    ``set_foreground``.

    Example:
        >>> observer = ManualForegroundObserver()
        >>> observer.set_foreground(False)  # app hidden
        >>> observer.set_foreground(True)   # app visible again, subscribers notified
    """

    def __init__(self, foreground: bool = True):
        """Initialize observer.

        Args:
            foreground: Initial state (default: True)
        """
        super().__init__()
        self._foreground = foreground

    @property
    def is_foreground(self) -> bool:
        return self._foreground

    def set_foreground(self, foreground: bool) -> None:
        """Update the state, notifying subscribers if it changed.

        Args:
            foreground: True when the host became active/visible
        """
        if foreground == self._foreground:
            return
        self._foreground = foreground
        _LOGGER.debug("Host %s", "entered foreground" if foreground else "entered background")
        self._notify()


def _supports_signal_handlers(loop: asyncio.AbstractEventLoop) -> bool:
    """Check, without installing anything, whether the loop can deliver SIGCONT."""
    if not hasattr(signal, "SIGCONT"):
        return False
    if threading.current_thread() is not threading.main_thread():
        return False
    handler = getattr(type(loop), "add_signal_handler", None)
    return handler is not None and handler is not asyncio.AbstractEventLoop.add_signal_handler


def create_foreground_observer(
    loop: Optional[asyncio.AbstractEventLoop] = None,
) -> IForegroundObserver:
    """Create the best observer the host platform supports.

    Picks the process-resume observer when the loop can handle signals and
    falls back to the inert observer otherwise (Windows, non-main thread,
    no running loop). Nothing is installed here: the resume observer adds
    its SIGCONT handler on the first subscribe and removes it when the last
    subscriber leaves. Monitors created on the same loop share one
    process-resume observer.

    Args:
        loop: Event loop to deliver signals on (default: running loop)

    Returns:
        Platform-backed observer, or ``InertForegroundObserver``
    """
    from .signal_observer import SignalForegroundObserver

    try:
        if loop is None:
            loop = asyncio.get_running_loop()
    except RuntimeError as err:
        _LOGGER.debug("Foreground notifications unavailable, using inert observer: %s", err)
        return InertForegroundObserver()

    if not _supports_signal_handlers(loop):
        _LOGGER.debug("Loop cannot handle SIGCONT here, using inert observer")
        return InertForegroundObserver()

    observer = _SIGNAL_OBSERVERS.get(loop)
    if observer is None:
        observer = SignalForegroundObserver(loop)
        _SIGNAL_OBSERVERS[loop] = observer
    return observer

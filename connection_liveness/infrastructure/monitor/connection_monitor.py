"""Connection monitor for stale connection detection.

This module implements liveness monitoring with:
- Staleness detection from the time since the last observed activity
- Exponential backoff with jitter between checks
- Reopen suppression right after a disconnect
- Delayed re-check when the host returns to the foreground

The monitor is single-threaded: every public call, poll firing and
foreground callback runs on the same event loop and is serialized.
"""

import logging
import random
import time
from typing import Any, Callable, Dict, Optional

from ...config_loader import MonitorConfig
from ...const import LOG_PREFIX
from ...domain.interfaces import (
    IConnection,
    IForegroundObserver,
    IScheduler,
    ISubscriptionHandle,
    ITimerHandle,
)
from ..decorators import handle_collaborator_errors
from ..platform import create_foreground_observer
from ..scheduling import AsyncioScheduler
from .poll_interval import calculate_poll_interval, is_stale, seconds_since

_LOGGER = logging.getLogger(__name__)

LogFunction = Callable[[str], None]


class ConnectionMonitor:
    """Watches a connection and reopens it when it goes stale.

    Lifecycle:
        Stopped -> Running via start(); Running -> Stopped via stop().
        Both calls are no-ops when already in the target state.

    While running, a one-shot timer fires, checks staleness, and re-arms
    itself with an interval that grows with ``reconnect_attempts``.

    The default foreground observer on Unix listens for SIGCONT through the
    event loop. The handler is installed only while at least one monitor is
    running, and not at all if the host already handles SIGCONT itself.

    Attributes:
        started_at: Clock reading when running began, None before first start
        stopped_at: Clock reading when running ended, None while running
        pinged_at: Last inbound activity, None until the first message
        disconnected_at: Last recorded disconnect, None after a connect
        reconnect_attempts: Consecutive stale cycles since the last connect

    Example:
        >>> monitor = ConnectionMonitor(connection, log=print)
        >>> monitor.start()
        >>> monitor.record_connect()
        >>> monitor.record_ping()   # on every heartbeat
        >>> monitor.stop()
    """

    def __init__(
        self,
        connection: IConnection,
        log: Optional[LogFunction] = None,
        *,
        config: Optional[MonitorConfig] = None,
        scheduler: Optional[IScheduler] = None,
        foreground_observer: Optional[IForegroundObserver] = None,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ):
        """Initialize connection monitor.

        Args:
            connection: Connection to reopen when stale
            log: Diagnostic sink (default: this module's logger at DEBUG)
            config: Thresholds and delays (default: built-in constants)
            scheduler: One-shot timer source (default: asyncio event loop)
            foreground_observer: Host lifecycle observer (default: best
                available for this platform, chosen now)
            clock: Monotonic clock in seconds
            rng: Random generator for jitter
        """
        self._connection = connection
        self._log_function = log or _LOGGER.debug
        self._config = config or MonitorConfig()
        self._scheduler = scheduler or AsyncioScheduler()
        self._foreground_observer = foreground_observer or create_foreground_observer()
        self._clock = clock
        self._rng = rng or random.Random()

        self.reconnect_attempts = 0
        self.started_at: Optional[float] = None
        self.stopped_at: Optional[float] = None
        self.pinged_at: Optional[float] = None
        self.disconnected_at: Optional[float] = None

        self._poll_timer: Optional[ITimerHandle] = None
        self._foreground_timer: Optional[ITimerHandle] = None
        self._foreground_subscription: Optional[ISubscriptionHandle] = None

    @property
    def config(self) -> MonitorConfig:
        return self._config

    @property
    def foreground_observer(self) -> IForegroundObserver:
        return self._foreground_observer

    # Lifecycle

    def start(self) -> None:
        """Start monitoring; no-op if already running.

        If the poll timer cannot be armed or the observer refuses the
        subscription (e.g. the default scheduler used outside a running
        event loop), the error is logged and the monitor stays stopped with
        its previous timestamps.
        """
        if self.is_running():
            return

        previous = (self.started_at, self.stopped_at)
        self.started_at = self._now()
        self.stopped_at = None
        try:
            interval = self._start_polling()
            self._foreground_subscription = self._foreground_observer.subscribe(
                self._visibility_did_change
            )
        except Exception as err:
            self._stop_polling()
            self.started_at, self.stopped_at = previous
            _LOGGER.error("%s failed to start: %s", LOG_PREFIX, err, exc_info=True)
            return

        self._log(f"{LOG_PREFIX} started. pollInterval = {interval:.0f} ms")

    def stop(self) -> None:
        """Stop monitoring; no-op if not running.

        Cancels the pending poll and foreground re-check and unsubscribes
        from the observer before returning.
        """
        if not self.is_running():
            return

        self.stopped_at = self._now()
        self._stop_polling()
        self._cancel_foreground_recheck()
        if self._foreground_subscription is not None:
            self._foreground_subscription.unsubscribe()
            self._foreground_subscription = None
        self._log(f"{LOG_PREFIX} stopped")

    def is_running(self) -> bool:
        return self.started_at is not None and self.stopped_at is None

    # Activity recording

    def record_message(self) -> None:
        """Record inbound traffic of any kind."""
        self.pinged_at = self._now()

    def record_ping(self) -> None:
        """Record a server heartbeat."""
        self.record_message()

    def record_connect(self) -> None:
        """Record a successful (re)connect, resetting backoff."""
        self.reconnect_attempts = 0
        self.disconnected_at = None
        self._log(f"{LOG_PREFIX} recorded connect")

    def record_disconnect(self) -> None:
        """Record a disconnect, including ones the monitor caused."""
        self.disconnected_at = self._now()
        self._log(f"{LOG_PREFIX} recorded disconnect")

    # Polling

    def _start_polling(self) -> float:
        self._stop_polling()
        return self._poll()

    def _stop_polling(self) -> None:
        if self._poll_timer is not None:
            self._poll_timer.cancel()
            self._poll_timer = None

    def _poll(self) -> float:
        """Arm the one-shot poll timer.

        Returns:
            Interval armed, in milliseconds
        """
        interval = self.get_poll_interval()
        self._poll_timer = self._scheduler.call_later(interval / 1000, self._on_poll_timer)
        return interval

    def _on_poll_timer(self) -> None:
        self._poll_timer = None
        if not self.is_running():
            return
        self.reconnect_if_stale()
        # reopen() may have stopped or restarted this monitor
        if self.is_running() and self._poll_timer is None:
            self._poll()

    def get_poll_interval(self) -> float:
        """Compute the next poll interval in milliseconds."""
        return calculate_poll_interval(
            self.reconnect_attempts,
            rng=self._rng,
            stale_threshold=self._config.stale_threshold,
            backoff_rate=self._config.reconnection_backoff_rate,
            max_exponent=self._config.max_backoff_exponent,
        )

    # Staleness

    def reconnect_if_stale(self) -> None:
        """Reopen the connection if it is stale and not already reconnecting."""
        if not self.connection_is_stale():
            return

        self._log(
            f"{LOG_PREFIX} detected stale connection. "
            f"reconnectAttempts = {self.reconnect_attempts}, "
            f"time stale = {self._seconds_since(self.refreshed_at):.3f} s, "
            f"stale threshold = {self._config.stale_threshold} s"
        )
        self.reconnect_attempts += 1

        if self.disconnected_recently():
            self._log(
                f"{LOG_PREFIX} skipping reopening recent disconnect. "
                f"time disconnected = {self._seconds_since(self.disconnected_at):.3f} s"
            )
        else:
            self._log(f"{LOG_PREFIX} reopening")
            self._reopen()

    @property
    def refreshed_at(self) -> Optional[float]:
        """Last activity, falling back to when monitoring started."""
        return self.pinged_at if self.pinged_at is not None else self.started_at

    def connection_is_stale(self) -> bool:
        return is_stale(self.refreshed_at, self._now(), self._config.stale_threshold)

    def disconnected_recently(self) -> bool:
        return (
            self.disconnected_at is not None
            and self._seconds_since(self.disconnected_at) < self._config.stale_threshold
        )

    # Foreground handling

    def _visibility_did_change(self) -> None:
        if not self.is_running() or not self._foreground_observer.is_foreground:
            return

        # Network may not be back yet; judge after a short delay
        self._cancel_foreground_recheck()
        self._foreground_timer = self._scheduler.call_later(
            self._config.foreground_recheck_delay, self._recheck_after_foreground
        )

    def _recheck_after_foreground(self) -> None:
        self._foreground_timer = None
        if not self.is_running():
            return

        if self.connection_is_stale() or not self._connection_is_open():
            self._log(
                f"{LOG_PREFIX} reopening stale connection on change. "
                f"foreground = {self._foreground_observer.is_foreground}"
            )
            self._reopen()

    def _cancel_foreground_recheck(self) -> None:
        if self._foreground_timer is not None:
            self._foreground_timer.cancel()
            self._foreground_timer = None

    # Collaborators

    @handle_collaborator_errors("Connection reopen")
    def _reopen(self) -> None:
        self._connection.reopen()

    @handle_collaborator_errors("Connection open check", default_return=False)
    def _connection_is_open(self) -> bool:
        return self._connection.is_open()

    @handle_collaborator_errors("Diagnostic log")
    def _log(self, message: str) -> None:
        self._log_function(message)

    def _now(self) -> float:
        return self._clock()

    def _seconds_since(self, timestamp: Optional[float]) -> float:
        return seconds_since(timestamp, self._now())

    def get_status(self) -> Dict[str, Any]:
        """Get a diagnostic snapshot of the monitor.

        Returns:
            Dictionary with lifecycle, timestamps and backoff state

        Example:
            >>> status = monitor.get_status()
            >>> print(f"Attempts: {status['reconnect_attempts']}")
        """
        return {
            "running": self.is_running(),
            "reconnect_attempts": self.reconnect_attempts,
            "started_at": self.started_at,
            "stopped_at": self.stopped_at,
            "pinged_at": self.pinged_at,
            "disconnected_at": self.disconnected_at,
            "seconds_since_refresh": self._seconds_since(self.refreshed_at),
        }

    def __repr__(self) -> str:
        return (
            f"ConnectionMonitor(running={self.is_running()}, "
            f"reconnect_attempts={self.reconnect_attempts})"
        )

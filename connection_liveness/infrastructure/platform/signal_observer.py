"""Foreground observer for processes suspended and resumed by job control.

A process stopped with Ctrl-Z (or SIGSTOP) receives SIGCONT when it is
resumed. Whether it resumed in the foreground is answered by comparing the
terminal's foreground process group with our own.
"""

import asyncio
import logging
import os
import signal
import sys
from typing import Optional

from .foreground_observer import NotifyingForegroundObserver

_LOGGER = logging.getLogger(__name__)


class SignalForegroundObserver(NotifyingForegroundObserver):
    """Notifies subscribers when the process resumes from a suspend.

    The SIGCONT handler is installed on the event loop when the first
    subscriber arrives and removed when the last one leaves. While it is
    installed it is process-wide. A SIGCONT handler the host already set
    with ``signal.signal`` is left alone, and subscribers are then never
    notified.

    Attributes:
        _loop: Event loop the SIGCONT handler is installed on
        _installed: Whether the handler is currently installed

    Example:
        >>> observer = SignalForegroundObserver(asyncio.get_running_loop())
        >>> handle = observer.subscribe(on_change)  # handler installed
        >>> # ... later
        >>> handle.unsubscribe()  # handler removed
    """

    def __init__(self, loop: asyncio.AbstractEventLoop, tty_fd: Optional[int] = None):
        """Initialize observer.

        Args:
            loop: Event loop to install the signal handler on
            tty_fd: Terminal file descriptor (default: stdin)
        """
        super().__init__()
        self._loop = loop
        self._tty_fd = tty_fd
        self._installed = False

    def install(self) -> None:
        """Install the SIGCONT handler unless the host already handles SIGCONT.

        Raises:
            AttributeError: If the platform has no SIGCONT
            NotImplementedError: If the loop does not support signal handlers
            RuntimeError: If the loop cannot install handlers from this thread
            ValueError: If not called from the main thread
        """
        if self._installed:
            return
        if callable(signal.getsignal(signal.SIGCONT)):
            _LOGGER.debug("SIGCONT already handled by the host, not installing")
            return
        self._loop.add_signal_handler(signal.SIGCONT, self._handle_resume)
        self._installed = True
        _LOGGER.debug("Installed SIGCONT handler for foreground notifications")

    def uninstall(self) -> None:
        """Remove the SIGCONT handler if this observer installed it."""
        if not self._installed:
            return
        self._installed = False
        self._loop.remove_signal_handler(signal.SIGCONT)
        _LOGGER.debug("Removed SIGCONT handler")

    def close(self) -> None:
        """Remove the SIGCONT handler and drop all subscribers."""
        self.uninstall()
        self._subscribers.clear()

    @property
    def installed(self) -> bool:
        return self._installed

    def _first_subscribed(self) -> None:
        try:
            self.install()
        except (AttributeError, NotImplementedError, RuntimeError, ValueError) as err:
            _LOGGER.debug("SIGCONT handler unavailable, foreground notifications off: %s", err)

    def _last_unsubscribed(self) -> None:
        self.uninstall()

    @property
    def is_foreground(self) -> bool:
        """Check if the process owns its controlling terminal.

        Processes without a terminal (daemons, services) are always
        considered in the foreground.
        """
        fd = self._tty_fd
        try:
            if fd is None:
                fd = sys.stdin.fileno()
            if not os.isatty(fd):
                return True
            return os.tcgetpgrp(fd) == os.getpgrp()
        except (AttributeError, OSError, ValueError):
            return True

    def _handle_resume(self) -> None:
        _LOGGER.debug("Process resumed (SIGCONT), foreground = %s", self.is_foreground)
        self._notify()

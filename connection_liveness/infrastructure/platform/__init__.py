"""Host foreground/background observers.

The observer is chosen once, when the monitor is wired up: a platform-backed
observer where the host supports one, otherwise an inert observer that never
notifies.
"""

from .foreground_observer import (
    InertForegroundObserver,
    ManualForegroundObserver,
    create_foreground_observer,
)
from .signal_observer import SignalForegroundObserver

__all__ = [
    "InertForegroundObserver",
    "ManualForegroundObserver",
    "SignalForegroundObserver",
    "create_foreground_observer",
]

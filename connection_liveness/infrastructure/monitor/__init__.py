"""Connection liveness monitor."""

from .connection_monitor import ConnectionMonitor, LogFunction
from .poll_interval import calculate_poll_interval, is_stale, seconds_since

__all__ = [
    "ConnectionMonitor",
    "LogFunction",
    "calculate_poll_interval",
    "is_stale",
    "seconds_since",
]

"""Connection liveness monitoring.

Watches a persistent, message-oriented connection for activity and asks the
transport to reopen when the connection goes stale, backing off between
attempts and re-checking when the host application returns to the foreground.
"""

from .config_loader import MonitorConfig, load_monitor_config
from .infrastructure.monitor import ConnectionMonitor
from .infrastructure.platform import create_foreground_observer
from .infrastructure.relay import EventEmitter, Subscription
from .infrastructure.scheduling import AsyncioScheduler

__all__ = [
    "AsyncioScheduler",
    "ConnectionMonitor",
    "EventEmitter",
    "MonitorConfig",
    "Subscription",
    "create_foreground_observer",
    "load_monitor_config",
]

"""Domain interfaces for connection liveness monitoring.

This module defines the contracts the monitor's collaborators must fulfill.
Using these interfaces enables:
- Transport independence: the monitor only asks a connection to reopen
- Testability: fakes replace the event loop, clock and host platform
- Optional platform integration: any observer can stand in for another
"""

from .i_connection import IConnection
from .i_foreground_observer import IForegroundObserver, ISubscriptionHandle
from .i_scheduler import IScheduler, ITimerHandle
from .i_subscription_consumer import ISubscriptionConsumer, ISubscriptionRegistry

__all__ = [
    "IConnection",
    "IForegroundObserver",
    "ISubscriptionHandle",
    "IScheduler",
    "ITimerHandle",
    "ISubscriptionConsumer",
    "ISubscriptionRegistry",
]

"""Channel relay: named-event fan-out for subscription payloads."""

from .event_emitter import EventEmitter
from .subscription import Subscription

__all__ = [
    "EventEmitter",
    "Subscription",
]

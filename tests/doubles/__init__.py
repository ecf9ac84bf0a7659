"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more reliable than mocking, and they implement the
actual interface contracts.

We primarily use Fakes because they:
- Actually implement the interface
- Can be reused across many tests
- Let time-dependent behavior be tested without sleeping

Example:
    >>> from tests.doubles import FakeClock, FakeScheduler
    >>> clock = FakeClock()
    >>> scheduler = FakeScheduler(clock)
    >>> scheduler.call_later(6.0, check)
    >>> scheduler.advance(6.0)  # check() runs
"""

from .fake_clock import FakeClock
from .fake_connection import FakeConnection
from .fake_scheduler import FakeScheduler, FakeTimerHandle
from .fake_subscription_consumer import FakeSubscriptionConsumer

__all__ = [
    "FakeClock",
    "FakeConnection",
    "FakeScheduler",
    "FakeTimerHandle",
    "FakeSubscriptionConsumer",
]

"""Pytest configuration and fixtures for connection liveness tests."""

from __future__ import annotations

import random
import sys
from pathlib import Path

# Add parent directory to Python path so we can import connection_liveness
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from connection_liveness.infrastructure.monitor import ConnectionMonitor
from connection_liveness.infrastructure.platform import ManualForegroundObserver
from tests.doubles import FakeClock, FakeConnection, FakeScheduler, FakeSubscriptionConsumer


@pytest.fixture
def clock() -> FakeClock:
    """Return a fake monotonic clock."""
    return FakeClock()


@pytest.fixture
def scheduler(clock) -> FakeScheduler:
    """Return a fake scheduler sharing the fake clock."""
    return FakeScheduler(clock)


@pytest.fixture
def connection() -> FakeConnection:
    """Return an open fake connection."""
    return FakeConnection()


@pytest.fixture
def observer() -> ManualForegroundObserver:
    """Return a host-driven foreground observer, initially in the foreground."""
    return ManualForegroundObserver()


@pytest.fixture
def log_messages() -> list:
    """Collect diagnostic messages."""
    return []


@pytest.fixture
def monitor(connection, log_messages, scheduler, observer, clock) -> ConnectionMonitor:
    """Create a stopped monitor wired to fakes."""
    return ConnectionMonitor(
        connection,
        log_messages.append,
        scheduler=scheduler,
        foreground_observer=observer,
        clock=clock,
        rng=random.Random(1234),
    )


@pytest.fixture
def consumer() -> FakeSubscriptionConsumer:
    """Return a fake subscription consumer."""
    return FakeSubscriptionConsumer()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "asyncio: mark test as an asyncio test")

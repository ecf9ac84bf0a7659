"""Integration tests for ConnectionMonitor on a real event loop.

Uses a short stale threshold so real timers fire within the test.
"""

import asyncio
import signal

import pytest

from connection_liveness import AsyncioScheduler, ConnectionMonitor, MonitorConfig
from connection_liveness.infrastructure.platform import (
    ManualForegroundObserver,
    SignalForegroundObserver,
)
from tests.doubles import FakeConnection


class HalfJitter:
    def random(self) -> float:
        return 0.5


FAST_CONFIG = MonitorConfig(stale_threshold=0.05, foreground_recheck_delay=0.01)


def _make_monitor(connection, observer=None):
    return ConnectionMonitor(
        connection,
        config=FAST_CONFIG,
        scheduler=AsyncioScheduler(),
        foreground_observer=observer or ManualForegroundObserver(),
        rng=HalfJitter(),
    )


class TestMonitorEventLoop:
    """Test monitor timers on asyncio."""

    @pytest.mark.asyncio
    async def test_stale_connection_reopened(self):
        """Test a silent connection is reopened by the poll timer."""
        connection = FakeConnection()
        monitor = _make_monitor(connection)

        monitor.start()
        try:
            await asyncio.sleep(0.3)
        finally:
            monitor.stop()

        assert connection.reopen_calls >= 1
        assert monitor.reconnect_attempts >= 1

    @pytest.mark.asyncio
    async def test_pings_keep_connection_alive(self):
        """Test regular pings prevent reopening."""
        connection = FakeConnection()
        monitor = _make_monitor(connection)

        monitor.start()
        try:
            for _ in range(15):
                monitor.record_ping()
                await asyncio.sleep(0.01)
        finally:
            monitor.stop()

        assert connection.reopen_calls == 0

    @pytest.mark.asyncio
    async def test_stop_silences_monitor(self):
        """Test no reopen happens after stop."""
        connection = FakeConnection()
        monitor = _make_monitor(connection)

        monitor.start()
        monitor.stop()
        await asyncio.sleep(0.2)

        assert connection.reopen_calls == 0

    @pytest.mark.asyncio
    async def test_foreground_recheck(self):
        """Test a resume reopens a closed connection after the delay."""
        connection = FakeConnection(open=False)
        observer = ManualForegroundObserver(foreground=False)
        monitor = _make_monitor(connection, observer)

        monitor.start()
        monitor.record_ping()
        try:
            observer.set_foreground(True)
            await asyncio.sleep(0.03)
        finally:
            monitor.stop()

        assert connection.reopen_calls == 1

    @pytest.mark.asyncio
    async def test_restart_inside_reopen(self):
        """Test a transport that restarts the monitor on reopen keeps one timer."""
        connection = FakeConnection()
        monitor = _make_monitor(connection)

        def restart():
            monitor.stop()
            monitor.start()

        connection.on_reopen = restart
        monitor.start()
        try:
            await asyncio.sleep(0.3)
        finally:
            monitor.stop()

        # A single chain fires about four times in 0.3 s; two chains would double each restart
        assert 1 <= connection.reopen_calls <= 5

    @pytest.mark.skipif(not hasattr(signal, "SIGCONT"), reason="requires SIGCONT")
    @pytest.mark.asyncio
    async def test_default_observer_holds_sigcont_while_running(self):
        """Test the default observer's SIGCONT handler lives between start and stop."""
        monitor = ConnectionMonitor(FakeConnection(), config=FAST_CONFIG, rng=HalfJitter())
        observer = monitor.foreground_observer

        assert isinstance(observer, SignalForegroundObserver)
        assert not observer.installed
        monitor.start()
        assert observer.installed
        monitor.stop()
        assert not observer.installed

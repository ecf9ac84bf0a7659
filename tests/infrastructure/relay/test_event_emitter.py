"""Tests for EventEmitter."""

from unittest.mock import Mock

from connection_liveness.infrastructure.relay import EventEmitter


class TestEventEmitter:
    """Test named-event fan-out."""

    def test_emit_calls_listeners_in_order(self):
        """Test listeners run in subscription order with the arguments."""
        emitter = EventEmitter()
        calls = []
        emitter.on("data", lambda value: calls.append(("first", value)))
        emitter.on("data", lambda value: calls.append(("second", value)))

        assert emitter.emit("data", 1) is True
        assert calls == [("first", 1), ("second", 1)]

    def test_emit_without_listeners(self):
        """Test emitting an unknown event returns False."""
        assert EventEmitter().emit("nothing") is False

    def test_events_are_independent(self):
        """Test listeners only receive their own event."""
        emitter = EventEmitter()
        listener = Mock()
        emitter.on("a", listener)

        emitter.emit("b")

        listener.assert_not_called()

    def test_once(self):
        """Test a once listener runs a single time."""
        emitter = EventEmitter()
        listener = Mock()
        emitter.once("connected", listener)

        emitter.emit("connected")
        emitter.emit("connected")

        listener.assert_called_once_with()
        assert emitter.listener_count("connected") == 0

    def test_off(self):
        """Test removing a listener."""
        emitter = EventEmitter()
        listener = Mock()
        emitter.on("data", listener)

        emitter.off("data", listener)
        emitter.off("data", listener)
        emitter.emit("data")

        listener.assert_not_called()
        assert emitter.event_names() == []

    def test_off_once_listener_by_original(self):
        """Test a once listener can be removed via the original function."""
        emitter = EventEmitter()
        listener = Mock()
        emitter.once("data", listener)

        emitter.remove_listener("data", listener)
        emitter.emit("data")

        listener.assert_not_called()

    def test_off_removes_first_registration_only(self):
        """Test duplicate registrations are removed one at a time."""
        emitter = EventEmitter()
        listener = Mock()
        emitter.on("data", listener)
        emitter.on("data", listener)

        emitter.off("data", listener)
        emitter.emit("data")

        listener.assert_called_once()

    def test_remove_all_listeners(self):
        """Test clearing one event or every event."""
        emitter = EventEmitter()
        emitter.on("a", Mock())
        emitter.on("b", Mock())

        emitter.remove_all_listeners("a")
        assert emitter.event_names() == ["b"]

        emitter.remove_all_listeners()
        assert emitter.event_names() == []

    def test_listener_removed_during_emit(self):
        """Test removal during emit does not skip remaining listeners."""
        emitter = EventEmitter()
        second = Mock()

        def first():
            emitter.off("data", first)

        emitter.on("data", first)
        emitter.on("data", second)
        emitter.emit("data")

        second.assert_called_once()

    def test_failing_listener_isolated(self, caplog):
        """Test a raising listener is logged and others still run."""
        emitter = EventEmitter()
        listener = Mock()
        emitter.on("data", Mock(side_effect=RuntimeError("boom")))
        emitter.on("data", listener)

        emitter.emit("data")

        listener.assert_called_once()
        assert "Error in 'data' listener" in caplog.text

    def test_on_as_decorator(self):
        """Test on() returns the listener."""
        emitter = EventEmitter()
        listener = Mock()

        assert emitter.add_listener("data", listener) is listener
        assert emitter.listeners("data") == [listener]

"""Named-event emitter."""

import logging
from typing import Any, Callable, Dict, List, Optional

_LOGGER = logging.getLogger(__name__)

Listener = Callable[..., Any]


class _OnceWrapper:
    """Calls a listener once, then removes itself from the emitter."""

    def __init__(self, emitter: "EventEmitter", event: str, listener: Listener):
        self.emitter = emitter
        self.event = event
        self.listener = listener

    def __call__(self, *args: Any) -> Any:
        self.emitter.off(self.event, self)
        return self.listener(*args)


class EventEmitter:
    """Maps event names to ordered listener lists.

    Listeners run in the order they subscribed. A listener that raises is
    logged and the remaining listeners still run.

    Example:
        >>> emitter = EventEmitter()
        >>> emitter.on("connected", lambda: print("up"))
        >>> emitter.emit("connected")
        up
        True
    """

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {}

    def on(self, event: str, listener: Listener) -> Listener:
        """Subscribe ``listener`` to ``event``.

        Returns:
            The listener, so ``on`` can be used as a decorator
        """
        self._listeners.setdefault(event, []).append(listener)
        return listener

    add_listener = on

    def once(self, event: str, listener: Listener) -> Listener:
        """Subscribe ``listener`` for a single emission of ``event``."""
        self.on(event, _OnceWrapper(self, event, listener))
        return listener

    def off(self, event: str, listener: Listener) -> None:
        """Remove the first registration of ``listener``; no-op if absent.

        Listeners added with ``once`` can be removed by passing the original
        function.
        """
        listeners = self._listeners.get(event)
        if not listeners:
            return

        for index, registered in enumerate(listeners):
            if registered == listener or (
                isinstance(registered, _OnceWrapper) and registered.listener == listener
            ):
                del listeners[index]
                break

        if not listeners:
            del self._listeners[event]

    remove_listener = off

    def remove_all_listeners(self, event: Optional[str] = None) -> None:
        """Remove every listener of ``event``, or of all events."""
        if event is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event, None)

    def emit(self, event: str, *args: Any) -> bool:
        """Call every listener of ``event`` with ``args``.

        Returns:
            True if the event had listeners
        """
        listeners = self._listeners.get(event)
        if not listeners:
            return False

        for listener in list(listeners):
            try:
                listener(*args)
            except Exception as err:
                _LOGGER.error("Error in '%s' listener: %s", event, err, exc_info=True)
        return True

    def listeners(self, event: str) -> List[Listener]:
        return [
            registered.listener if isinstance(registered, _OnceWrapper) else registered
            for registered in self._listeners.get(event, [])
        ]

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))

    def event_names(self) -> List[str]:
        return list(self._listeners)

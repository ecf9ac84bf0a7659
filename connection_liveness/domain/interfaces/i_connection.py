"""IConnection interface for the monitored transport."""

from abc import ABC, abstractmethod


class IConnection(ABC):
    """Interface for the connection whose liveness is monitored.

    The monitor never opens sockets or frames messages itself. It only
    observes activity timestamps and, when the connection looks dead,
    asks the transport to re-establish itself.

    Example:
        >>> connection = WebSocketConnection(url)
        >>> monitor = ConnectionMonitor(connection)
        >>> monitor.start()
    """

    @abstractmethod
    def reopen(self) -> None:
        """Request that the transport re-establish itself.

        Fire-and-forget: the call returns immediately and the monitor never
        observes the outcome. A successful reconnect is reported back through
        ``ConnectionMonitor.record_connect()``.
        """

    @abstractmethod
    def is_open(self) -> bool:
        """Check whether the transport is currently open.

        Returns:
            True if open, False otherwise
        """

"""ISubscriptionConsumer interface for the channel relay."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ISubscriptionRegistry(ABC):
    """Registry of active subscriptions owned by a consumer."""

    @abstractmethod
    def remove(self, subscription: Any) -> None:
        """Remove a subscription and tell the server about it.

        Args:
            subscription: Subscription to remove
        """


class ISubscriptionConsumer(ABC):
    """Interface for the consumer that owns the connection.

    A subscription never writes to the transport directly; it hands
    envelopes to its consumer.

    Attributes:
        subscriptions: Registry the subscription removes itself from
    """

    subscriptions: ISubscriptionRegistry

    @abstractmethod
    def send(self, data: Dict[str, Any]) -> None:
        """Send an envelope over the connection.

        Args:
            data: Envelope with ``command``, ``identifier`` and ``data`` keys
        """

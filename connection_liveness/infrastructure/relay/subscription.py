"""Channel subscription relaying payloads to event listeners."""

import json
import logging
from typing import Any, Dict, Optional

from ...const import COMMAND_MESSAGE, DEFAULT_RECEIVED_ACTION
from ...domain.interfaces import ISubscriptionConsumer
from .event_emitter import EventEmitter

_LOGGER = logging.getLogger(__name__)


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


class Subscription(EventEmitter):
    """Subscription to a server channel.

    The identifier is the JSON encoding of the channel params. Outgoing
    actions are wrapped in a ``message`` envelope and handed to the
    consumer; incoming payloads are emitted under their ``action`` name.

    Events:
        connected, disconnected, rejected: subscription lifecycle
        error: with the error as argument
        <action>: with the payload dict as argument ("received" by default)

    Example:
        >>> subscription = Subscription(consumer, {"channel": "ChatChannel", "room": 1})
        >>> subscription.on("new_message", handle_message)
        >>> subscription.perform("speak", {"body": "hello"})
    """

    def __init__(
        self,
        consumer: ISubscriptionConsumer,
        params: Optional[Dict[str, Any]] = None,
    ):
        """Initialize subscription.

        Args:
            consumer: Consumer owning the connection
            params: Channel params (default: empty)
        """
        super().__init__()
        self.consumer = consumer
        self.identifier = _to_json(params or {})

    def perform(self, action: str, data: Optional[Dict[str, Any]] = None) -> None:
        """Perform a channel action with optional data.

        Args:
            action: Server-side action name
            data: Action arguments (not modified)
        """
        payload = dict(data or {})
        payload["action"] = action
        self.send(payload)

    def send(self, data: Dict[str, Any]) -> None:
        self.consumer.send(
            {
                "command": COMMAND_MESSAGE,
                "identifier": self.identifier,
                "data": _to_json(data),
            }
        )

    def unsubscribe(self) -> None:
        self.consumer.subscriptions.remove(self)

    def connected(self) -> None:
        self.emit("connected")

    def disconnected(self) -> None:
        self.emit("disconnected")

    def rejected(self) -> None:
        _LOGGER.debug("Subscription rejected: %s", self.identifier)
        self.emit("rejected")

    def error(self, error: Any) -> None:
        self.emit("error", error)

    def received(self, data: Optional[Dict[str, Any]] = None) -> None:
        """Relay a server payload to listeners of its action.

        Args:
            data: Payload; ``action`` defaults to "received" when missing
        """
        data = {} if data is None else data
        if data.get("action") is None:
            data["action"] = DEFAULT_RECEIVED_ACTION
        self.emit(data["action"], data)

    def __repr__(self) -> str:
        return f"Subscription(identifier={self.identifier!r})"

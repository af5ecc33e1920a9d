"""Simple in-process event bus for decoupled event emission."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import count
from typing import Any

EventHandler = Callable[[dict[str, Any]], None]

IMAGE_INSERTED = "image_inserted"

logger = logging.getLogger("od.events")

_ids = count(1)


@dataclass(frozen=True)
class Subscription:
    """Handle returned by `EventBus.subscribe`, used to unsubscribe."""

    event_name: str
    handler: EventHandler
    token: int = field(default_factory=lambda: next(_ids))


class EventBus:
    """Dispatches events to subscribers by event name."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Subscription]] = defaultdict(list)

    def subscribe(self, event_name: str, handler: EventHandler) -> Subscription:
        """Register a callback for an event."""
        subscription = Subscription(event_name=event_name, handler=handler)
        self._handlers[event_name].append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Remove a registration. Returns False when it was not registered."""
        handlers = self._handlers.get(subscription.event_name, [])
        if subscription not in handlers:
            return False
        handlers.remove(subscription)
        return True

    def subscriber_count(self, event_name: str) -> int:
        return len(self._handlers.get(event_name, []))

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        """Emit an event to all subscribers.

        Handlers run synchronously in registration order; an exception from a
        handler propagates to the emitter.
        """
        handlers = list(self._handlers.get(event_name, []))
        logger.debug("emit %s to %d handler(s)", event_name, len(handlers))
        for subscription in handlers:
            subscription.handler(payload)

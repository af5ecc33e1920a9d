"""Connects image-insertion events to drawer insertion."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from core.event_bus import IMAGE_INSERTED, EventBus, Subscription
from document.drawer import DrawerInserter

logger = logging.getLogger("od.lifecycle")


class LifecycleState(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


class LifecycleController:
    """Holds at most one `image_inserted` subscription on an event bus."""

    def __init__(self, bus: EventBus, inserter: DrawerInserter) -> None:
        self.bus = bus
        self.inserter = inserter
        self._subscription: Subscription | None = None

    @property
    def state(self) -> LifecycleState:
        return LifecycleState.ENABLED if self._subscription is not None else LifecycleState.DISABLED

    def enable(self) -> Subscription:
        """Subscribe to image insertions. Returns the active handle if already enabled."""
        if self._subscription is None:
            self._subscription = self.bus.subscribe(IMAGE_INSERTED, self._on_image_inserted)
            logger.info("OCR drawers enabled")
        return self._subscription

    def disable(self, subscription: Subscription | None = None) -> bool:
        """Drop the subscription. Returns False when there was nothing to drop."""
        if self._subscription is None:
            return False
        if subscription is not None and subscription != self._subscription:
            logger.debug("ignoring stale subscription handle %s", subscription.token)
            return False
        self.bus.unsubscribe(self._subscription)
        self._subscription = None
        logger.info("OCR drawers disabled")
        return True

    def _on_image_inserted(self, payload: dict[str, Any]) -> None:
        image_path = payload.get("image_path")
        document = payload.get("document")
        if not image_path or document is None:
            logger.debug("image event without path or document: %s", payload)
            return
        anchor_line = int(payload.get("anchor_line", 0))
        self.inserter.insert_annotation(document, anchor_line, image_path)

"""Synchronous in-process publication of catalog change events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageAppended:
    """A new record was appended to the catalog at ``index``."""

    index: int
    reference: str
    attribution: str


@dataclass(frozen=True)
class ImageUpdated:
    """The record at ``index`` was overwritten."""

    index: int
    reference: str
    attribution: str


CatalogEvent = ImageAppended | ImageUpdated
EventHandler = Callable[[CatalogEvent], None]


class EventBus:
    """Fan out catalog events to subscribers on the publishing call."""

    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []
        self._lock = Lock()

    def subscribe(self, handler: EventHandler) -> None:
        """Register ``handler``; subscribing twice delivers events twice."""
        with self._lock:
            self._handlers.append(handler)

    def unsubscribe(self, handler: EventHandler) -> None:
        """Remove one registration of ``handler`` if present."""
        with self._lock:
            try:
                self._handlers.remove(handler)
            except ValueError:
                pass

    def publish(self, event: CatalogEvent) -> None:
        """Deliver ``event`` to every subscriber in registration order.

        Events are published after the change is committed, so a failing
        handler is logged and skipped rather than reported to the caller.
        """
        logger.info(
            "%s index=%d reference=%s attribution=%s",
            type(event).__name__,
            event.index,
            event.reference,
            event.attribution,
        )
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Handler %r failed on %s", handler, type(event).__name__)


_EVENT_BUS: EventBus | None = None


def get_event_bus() -> EventBus:
    """Return the process-wide event bus."""
    global _EVENT_BUS
    if _EVENT_BUS is None:
        _EVENT_BUS = EventBus()
    return _EVENT_BUS

import logging
import threading
from typing import Protocol

from movie_catalog.events.movie_created import DomainEvent

logger = logging.getLogger(__name__)


class EventBus(Protocol):
    def publish(self, *events: DomainEvent) -> None: ...


class InMemoryEventBus:
    """Keeps published events in order; used in-process and in tests."""

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []
        self._lock = threading.Lock()

    def publish(self, *events: DomainEvent) -> None:
        with self._lock:
            self._events.extend(events)
        for event in events:
            logger.info(
                "Published %s event for aggregate %s", event.kind(), event.aggregate_id()
            )

    @property
    def events(self) -> list[DomainEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

"""In-memory implementation of the EventStore."""

import threading
from collections.abc import Callable, Iterable

from events.domain import Event, EventId, Spot
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Process-wide dataset snapshot guarded by a single lock.

    Events never change after load. Spots are replaced one record at a time
    through ``modify_spot``; spot reads take the same lock.
    """

    def __init__(self, events: Iterable[Event], spots: Iterable[Spot]) -> None:
        self._events = tuple(events)
        self._spots = list(spots)
        self._lock = threading.Lock()

    def list_events(self) -> list[Event]:
        return list(self._events)

    def get_event(self, event_id: EventId) -> Event | None:
        return next((event for event in self._events if event.id == event_id), None)

    def get_spots_for_event(self, event_id: EventId) -> list[Spot]:
        with self._lock:
            return [spot for spot in self._spots if spot.event_id == event_id]

    def modify_spot(
        self, event_id: EventId, spot_name: str, change: Callable[[Spot], Spot]
    ) -> Spot | None:
        with self._lock:
            for index, spot in enumerate(self._spots):
                if spot.event_id == event_id and spot.name == spot_name:
                    updated = change(spot)
                    self._spots[index] = updated
                    return updated
        return None

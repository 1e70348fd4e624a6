"""Event service - read-side business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from events.domain import EventId
from events.domain.errors import EventNotFoundError
from events.domain.models import Event, Spot
from events.stores.interfaces import EventStore


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Only the canonical decimal form of a positive ID matches an event,
        so "01", "+1" and "abc" are all unknown.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        try:
            parsed = EventId.from_canonical_string(event_id)
        except ValueError as exc:
            raise EventNotFoundError(event_id) from exc

        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_spots_for_event(self, event_id: str) -> list[Spot]:
        """Return spots for an event.

        Unknown and non-canonical IDs yield an empty list.
        """
        try:
            parsed = EventId.from_canonical_string(event_id)
        except ValueError:
            return []
        return self._store.get_spots_for_event(parsed)

"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from events.domain import Event, EventId, Spot


class EventStore(ABC):
    """Interface for the event and spot dataset."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in storage order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return the first event with this ID, or None if not found."""
        ...

    @abstractmethod
    def get_spots_for_event(self, event_id: EventId) -> list[Spot]:
        """Return all spots of an event in storage order."""
        ...

    @abstractmethod
    def modify_spot(
        self, event_id: EventId, spot_name: str, change: Callable[[Spot], Spot]
    ) -> Spot | None:
        """Atomically replace a spot with ``change(spot)``.

        The first spot matching ``event_id`` and ``spot_name`` is passed to
        ``change`` and the result is stored at the same position. Errors
        raised by ``change`` propagate and leave the spot untouched.
        Returns the stored spot, or None if no spot matches.
        """
        ...

"""Domain models representing the in-memory dataset.

These are pure domain objects with no API input rules.
"""

from dataclasses import dataclass, replace

from events.domain.errors import SpotAlreadyReservedError
from events.domain.value_objects import EventId, Money, SpotId, SpotStatus


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    organization: str
    date: str
    price: Money
    rating: str
    image_url: str
    created_at: str
    location: str


@dataclass(frozen=True)
class Spot:
    """Domain representation of a reservable Spot."""

    id: SpotId
    name: str
    status: SpotStatus
    event_id: EventId

    @property
    def is_reserved(self) -> bool:
        return self.status is SpotStatus.RESERVED

    def reserve(self) -> "Spot":
        """Return a reserved copy of this spot.

        Raises:
            SpotAlreadyReservedError: If the spot is already reserved.
        """
        if self.is_reserved:
            raise SpotAlreadyReservedError(self.name)
        return replace(self, status=SpotStatus.RESERVED)

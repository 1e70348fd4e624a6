from events.domain.models import Event, Spot
from events.domain.value_objects import EventId, Money, SpotId, SpotStatus

__all__ = [
    "Event",
    "Spot",
    "EventId",
    "SpotId",
    "SpotStatus",
    "Money",
]

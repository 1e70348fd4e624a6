"""Builders for domain records used across tests."""

from events.domain import Event, EventId, Money, Spot, SpotId, SpotStatus


def make_event(event_id: int, name: str = "Concert") -> Event:
    return Event(
        id=EventId(event_id),
        name=name,
        organization="Org",
        date="2026-07-18",
        price=Money(2500),
        rating="PG",
        image_url=f"https://images.example.com/{event_id}.jpg",
        created_at="2026-03-01T10:00:00Z",
        location="Main Hall",
    )


def make_spot(
    spot_id: int,
    name: str,
    event_id: int,
    status: SpotStatus = SpotStatus.AVAILABLE,
) -> Spot:
    return Spot(id=SpotId(spot_id), name=name, status=status, event_id=EventId(event_id))

"""Reservation service - the spot status state machine."""

import logging

from events.domain import EventId
from events.domain.errors import (
    InvalidEventIdError,
    SpotAlreadyReservedError,
    SpotNotFoundError,
)
from events.domain.models import Spot
from events.domain.value_objects import parse_integer
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class ReservationService:
    """Service for reserving spots."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def reserve(self, event_id: str, spot_name: str) -> Spot:
        """Reserve the spot named ``spot_name`` of an event.

        Lookup, status check and write happen in one store transaction, so
        of several concurrent callers for the same spot exactly one succeeds.
        If an event has several spots with the same name the first one in
        storage order is used. An integer ID that no event can carry (zero or
        negative) matches no spot.

        Raises:
            InvalidEventIdError: If the event_id is not an integer.
            SpotNotFoundError: If the event has no spot with that name.
            SpotAlreadyReservedError: If the spot is already reserved.
        """
        try:
            number = parse_integer(event_id)
        except ValueError as exc:
            raise InvalidEventIdError() from exc

        spot = None
        if number > 0:
            parsed = EventId(number)
            try:
                spot = self._store.modify_spot(parsed, spot_name, Spot.reserve)
            except SpotAlreadyReservedError:
                logger.info("Spot %r of event %s is already reserved", spot_name, parsed)
                raise

        if spot is None:
            logger.info("Spot %r not found for event %s", spot_name, event_id)
            raise SpotNotFoundError(event_id, spot_name)

        logger.info("Reserved spot %s (%r) of event %s", spot.id.value, spot.name, spot.event_id)
        return spot

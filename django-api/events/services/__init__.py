from events.services.event_service import EventService
from events.services.reservation_service import ReservationService

__all__ = ["EventService", "ReservationService"]

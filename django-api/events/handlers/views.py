"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to the exception handler
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.apps import apps
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.serializers import Serializer
from rest_framework.views import APIView

from events.domain.errors import InvalidReservationRequestError, SerializationError
from events.handlers.parsers import AnyMediaTypeJSONParser
from events.handlers.serializers import (
    EventSerializer,
    ReserveSpotRequestSerializer,
    SpotSerializer,
)
from events.services import EventService, ReservationService
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

RESERVED_MESSAGE = "Spot reserved successfully"


def get_store() -> EventStore:
    return apps.get_app_config("events").store


def serialize(serializer_class: type[Serializer], instance, subject: str, many: bool = False):
    try:
        return serializer_class(instance, many=many).data
    except (AttributeError, TypeError, ValueError) as exc:
        logger.exception("Failed to serialize %s", subject)
        raise SerializationError(subject) from exc


class EventListView(APIView):
    """Handler for GET /events"""

    def get(self, request: Request) -> Response:
        events = EventService(get_store()).list_events()
        return Response(serialize(EventSerializer, events, "events", many=True))


class EventDetailView(APIView):
    """Handler for GET /events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = EventService(get_store()).get_event(event_id)
        return Response(serialize(EventSerializer, event, "event details"))


class SpotListView(APIView):
    """Handler for GET /events/{event_id}/spots"""

    def get(self, request: Request, event_id: str) -> Response:
        spots = EventService(get_store()).get_spots_for_event(event_id)
        return Response(serialize(SpotSerializer, spots, "event spots", many=True))


class ReserveSpotView(APIView):
    """Handler for POST /event/{event_id}/reserve"""

    parser_classes = [AnyMediaTypeJSONParser]

    def post(self, request: Request, event_id: str) -> Response:
        try:
            payload = request.data
        except (ParseError, UnsupportedMediaType) as exc:
            raise InvalidReservationRequestError() from exc

        serializer = ReserveSpotRequestSerializer(data=payload)
        if not serializer.is_valid():
            raise InvalidReservationRequestError()
        reservation = serializer.save()

        ReservationService(get_store()).reserve(event_id, reservation.spot)
        return Response({"message": RESERVED_MESSAGE})

"""Builds the startup dataset from a JSON file.

Any failure raises DatasetLoadError; there is no partial load.
"""

import json
import logging
from pathlib import Path

from rest_framework import serializers

from events.domain import Event, EventId, Money, Spot, SpotId, SpotStatus
from events.domain.errors import DatasetLoadError
from events.stores.memory_store import InMemoryEventStore

logger = logging.getLogger(__name__)


class EventRecordSerializer(serializers.Serializer):
    id = serializers.IntegerField(min_value=1)
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    organization = serializers.CharField(allow_blank=True, trim_whitespace=False)
    date = serializers.CharField(allow_blank=True)
    price = serializers.IntegerField(min_value=0)
    rating = serializers.CharField(allow_blank=True)
    image_url = serializers.CharField(allow_blank=True)
    created_at = serializers.CharField(allow_blank=True)
    location = serializers.CharField(allow_blank=True, trim_whitespace=False)

    def create(self, validated_data: dict) -> Event:
        return Event(
            id=EventId(validated_data["id"]),
            name=validated_data["name"],
            organization=validated_data["organization"],
            date=validated_data["date"],
            price=Money(validated_data["price"]),
            rating=validated_data["rating"],
            image_url=validated_data["image_url"],
            created_at=validated_data["created_at"],
            location=validated_data["location"],
        )


class SpotRecordSerializer(serializers.Serializer):
    id = serializers.IntegerField(min_value=1)
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    status = serializers.ChoiceField(choices=[status.value for status in SpotStatus])
    event_id = serializers.IntegerField(min_value=1)

    def create(self, validated_data: dict) -> Spot:
        return Spot(
            id=SpotId(validated_data["id"]),
            name=validated_data["name"],
            status=SpotStatus(validated_data["status"]),
            event_id=EventId(validated_data["event_id"]),
        )


class DatasetSerializer(serializers.Serializer):
    events = EventRecordSerializer(many=True)
    spots = SpotRecordSerializer(many=True)

    def create(self, validated_data: dict) -> InMemoryEventStore:
        events = [EventRecordSerializer().create(item) for item in validated_data["events"]]
        spots = [SpotRecordSerializer().create(item) for item in validated_data["spots"]]
        return InMemoryEventStore(events, spots)


def parse_dataset(raw: object, source: str = "<memory>") -> InMemoryEventStore:
    """Validate decoded JSON and build a store from it."""
    serializer = DatasetSerializer(data=raw)
    if not serializer.is_valid():
        raise DatasetLoadError(source, f"invalid records {serializer.errors}")
    return serializer.save()


def load_store(path: str | Path) -> InMemoryEventStore:
    """Read the dataset file at ``path``.

    Raises:
        DatasetLoadError: If the file is missing, is not JSON, or holds
            records of the wrong shape.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DatasetLoadError(str(path), f"cannot read file ({exc.strerror})") from exc
    except json.JSONDecodeError as exc:
        raise DatasetLoadError(str(path), f"malformed JSON ({exc.msg})") from exc

    store = parse_dataset(raw, str(path))
    logger.info(
        "Loaded %d events and %d spots from %s",
        len(raw["events"]),
        len(raw["spots"]),
        path,
    )
    return store

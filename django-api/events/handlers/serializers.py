"""Serializers for transforming domain models to API responses
and reservation payloads to typed requests."""

from dataclasses import dataclass

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    organization = serializers.CharField()
    date = serializers.CharField()
    price = serializers.IntegerField(source="price.amount")
    rating = serializers.CharField()
    image_url = serializers.CharField()
    created_at = serializers.CharField()
    location = serializers.CharField()


class SpotSerializer(serializers.Serializer):
    """Serializer for Spot domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    status = serializers.CharField(source="status.value")
    event_id = serializers.IntegerField(source="event_id.value")


@dataclass(frozen=True)
class ReserveSpotRequest:
    spot: str


class StrictCharField(serializers.CharField):
    """CharField that refuses numbers and other non-string JSON values."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class ReserveSpotRequestSerializer(serializers.Serializer):
    """Body of POST /event/{event_id}/reserve."""

    spot = StrictCharField(allow_blank=True, trim_whitespace=False)

    def create(self, validated_data: dict) -> ReserveSpotRequest:
        return ReserveSpotRequest(spot=validated_data["spot"])

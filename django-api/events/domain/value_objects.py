"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Self

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_integer(value: str) -> int:
    """Parse an optionally signed ASCII decimal integer."""
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"Not an integer: {value!r}")
    return int(value)


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("EventId must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=parse_integer(value))

    @classmethod
    def from_canonical_string(cls, value: str) -> Self:
        """Parse only the form ``str(event_id)`` produces, e.g. no "01" or "+1"."""
        event_id = cls.from_string(value)
        if str(event_id) != value:
            raise ValueError(f"Not a canonical event ID: {value!r}")
        return event_id

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SpotId:
    """Unique identifier for a Spot."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("SpotId must be a positive integer")


@dataclass(frozen=True)
class Money:
    """Price in the smallest currency unit."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")


class SpotStatus(Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"

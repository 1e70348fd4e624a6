"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    SPOT_NOT_FOUND = "SPOT_NOT_FOUND"
    SPOT_ALREADY_RESERVED = "SPOT_ALREADY_RESERVED"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_REQUEST_BODY = "INVALID_REQUEST_BODY"
    SERIALIZATION_FAILURE = "SERIALIZATION_FAILURE"
    DATASET_LOAD_FAILED = "DATASET_LOAD_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class SpotNotFoundError(DomainError):
    """Raised when no spot of the event carries the requested name."""

    def __init__(self, event_id: str, spot_name: str) -> None:
        super().__init__(
            code=ErrorCode.SPOT_NOT_FOUND,
            message="Spot not found",
        )
        self.event_id = event_id
        self.spot_name = spot_name


class SpotAlreadyReservedError(DomainError):
    """Raised when reserving a spot that is already reserved."""

    def __init__(self, spot_name: str) -> None:
        super().__init__(
            code=ErrorCode.SPOT_ALREADY_RESERVED,
            message="Spot is already reserved",
        )
        self.spot_name = spot_name


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID",
        )


class InvalidReservationRequestError(DomainError):
    """Raised when a reservation request body is malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_REQUEST_BODY,
            message="Invalid request body",
        )


class SerializationError(DomainError):
    """Raised when a response payload cannot be encoded."""

    def __init__(self, subject: str) -> None:
        super().__init__(
            code=ErrorCode.SERIALIZATION_FAILURE,
            message=f"Error encoding {subject} to JSON",
        )


class DatasetLoadError(DomainError):
    """Raised when the startup dataset cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.DATASET_LOAD_FAILED,
            message=f"Could not load dataset from {path}: {reason}",
        )
        self.path = path

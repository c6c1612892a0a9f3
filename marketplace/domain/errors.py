"""Domain error codes for the marketplace module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EXPERIENCE_NOT_FOUND = "EXPERIENCE_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ExperienceNotFoundError(DomainError):
    """Raised when an experience is not found."""

    def __init__(self, experience_id: str) -> None:
        super().__init__(
            code=ErrorCode.EXPERIENCE_NOT_FOUND,
            message="Experience not found",
        )
        object.__setattr__(self, "experience_id", experience_id)


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        object.__setattr__(self, "booking_id", booking_id)


class PersistenceError(DomainError):
    """Raised when the underlying store fails to read or write."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILURE,
            message="Storage operation failed",
        )
        object.__setattr__(self, "operation", operation)

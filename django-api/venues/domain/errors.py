"""Domain error codes for the venues module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    INVALID_VENUE_ID = "INVALID_VENUE_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class VenueNotFoundError(DomainError):
    """Raised when a venue is not found."""

    def __init__(self, venue_id: str | None) -> None:
        super().__init__(
            code=ErrorCode.VENUE_NOT_FOUND,
            message=f"Venue not found with id: {venue_id}",
        )


class InvalidVenueIdError(DomainError):
    """Raised when a venue ID is malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_VENUE_ID,
            message="Invalid venue ID format",
        )

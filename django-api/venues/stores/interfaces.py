"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from venues.domain import SeatRecommendation, Venue, VenueId


class VenueStore(ABC):
    """Interface for venue persistence operations."""

    @abstractmethod
    def list_venues(self) -> list[Venue]:
        """Return all venues. Order is implementation-defined."""
        ...

    @abstractmethod
    def get_venue(self, venue_id: VenueId) -> Venue | None:
        """Return a venue by exact, case-sensitive ID, or None if not found."""
        ...

    @abstractmethod
    def get_recommendations_for_venue(self, venue_id: VenueId) -> list[SeatRecommendation]:
        """Return a venue's recommendations in insertion order."""
        ...

    @abstractmethod
    def venue_exists(self, venue_id: VenueId) -> bool:
        """Check if a venue exists."""
        ...

    @abstractmethod
    def save_venue(self, venue: Venue) -> None:
        """Create a venue, or replace the name and recommendations of an existing one."""
        ...

    @abstractmethod
    def delete_venue(self, venue_id: VenueId) -> bool:
        """Delete a venue and its recommendations. Return True if it existed."""
        ...

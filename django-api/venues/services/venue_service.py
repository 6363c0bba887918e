"""Venue service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from venues.domain import SeatRecommendation, Venue, VenueId
from venues.domain.errors import InvalidVenueIdError, VenueNotFoundError
from venues.stores.interfaces import VenueStore

logger = logging.getLogger(__name__)


class VenueService:
    """Service for venue catalog operations."""

    def __init__(self, store: VenueStore) -> None:
        self._store = store

    def list_venues(self) -> list[Venue]:
        """Return all venues."""
        return self._store.list_venues()

    def get_venue(self, venue_id: str | None) -> Venue:
        """Return a venue by ID.

        Raises:
            InvalidVenueIdError: If the venue_id contains whitespace or control characters.
            VenueNotFoundError: If the venue does not exist.
        """
        parsed_id = self._parse_id(venue_id)
        logger.debug("Looking up venue %r", parsed_id.value)
        venue = self._store.get_venue(parsed_id)
        if venue is None:
            logger.warning("Venue not found: %r", parsed_id.value)
            raise VenueNotFoundError(venue_id)
        return venue

    def get_recommendations(self, venue_id: str | None) -> list[SeatRecommendation]:
        """Return seat recommendations for a venue.

        Raises:
            InvalidVenueIdError: If the venue_id contains whitespace or control characters.
            VenueNotFoundError: If the venue does not exist.
        """
        parsed_id = self._parse_id(venue_id)
        if not self._store.venue_exists(parsed_id):
            logger.warning("Venue not found: %r", parsed_id.value)
            raise VenueNotFoundError(venue_id)
        return self._store.get_recommendations_for_venue(parsed_id)

    @staticmethod
    def _parse_id(venue_id: str | None) -> VenueId:
        # A missing ID can never match, so it reads as a miss rather than bad input.
        if not venue_id:
            raise VenueNotFoundError(venue_id)
        try:
            return VenueId.from_string(venue_id)
        except ValueError as exc:
            raise InvalidVenueIdError() from exc

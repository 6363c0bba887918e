"""In-memory implementation of the VenueStore."""

from collections.abc import Iterable

from venues.domain import SeatRecommendation, Venue, VenueId
from venues.stores.interfaces import VenueStore


class InMemoryVenueStore(VenueStore):
    """Dict-backed venue store, keyed by venue ID in insertion order."""

    def __init__(self, venues: Iterable[Venue] = ()) -> None:
        self._venues: dict[str, Venue] = {}
        for venue in venues:
            self.save_venue(venue)

    def list_venues(self) -> list[Venue]:
        return list(self._venues.values())

    def get_venue(self, venue_id: VenueId) -> Venue | None:
        return self._venues.get(venue_id.value)

    def get_recommendations_for_venue(self, venue_id: VenueId) -> list[SeatRecommendation]:
        venue = self._venues.get(venue_id.value)
        if venue is None:
            return []
        return list(venue.recommendations)

    def venue_exists(self, venue_id: VenueId) -> bool:
        return venue_id.value in self._venues

    def save_venue(self, venue: Venue) -> None:
        self._venues[venue.id.value] = venue

    def delete_venue(self, venue_id: VenueId) -> bool:
        return self._venues.pop(venue_id.value, None) is not None

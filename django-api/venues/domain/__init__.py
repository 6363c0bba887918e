from venues.domain.models import SeatRecommendation, Venue
from venues.domain.value_objects import VenueId

__all__ = [
    "Venue",
    "SeatRecommendation",
    "VenueId",
]

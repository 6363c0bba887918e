"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in venues/models.py (persistence layer).
"""

from dataclasses import dataclass

from venues.domain.value_objects import VenueId


@dataclass(frozen=True)
class SeatRecommendation:
    """Editorial suggestion of where to sit at a venue."""

    section: str | None = None
    category: str | None = None
    reason: str | None = None
    estimated_price: str | None = None
    tip: str | None = None


@dataclass(frozen=True)
class Venue:
    """Domain representation of a Venue."""

    id: VenueId
    name: str | None
    recommendations: tuple[SeatRecommendation, ...] = ()

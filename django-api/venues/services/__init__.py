from venues.services.venue_service import VenueService

__all__ = ["VenueService"]

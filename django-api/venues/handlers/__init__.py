from venues.handlers.views import RecommendationListView, VenueDetailView, VenueListView

__all__ = ["VenueListView", "VenueDetailView", "RecommendationListView"]

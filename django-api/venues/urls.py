from django.urls import path

from venues.handlers import RecommendationListView, VenueDetailView, VenueListView

urlpatterns = [
    path("venues", VenueListView.as_view(), name="venue-list"),
    path("venues/<str:venue_id>", VenueDetailView.as_view(), name="venue-detail"),
    path(
        "venues/<str:venue_id>/recommendations",
        RecommendationListView.as_view(),
        name="recommendation-list",
    ),
]

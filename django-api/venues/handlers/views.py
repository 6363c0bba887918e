"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from venues.domain.errors import DomainError, InvalidVenueIdError, VenueNotFoundError
from venues.handlers.serializers import SeatRecommendationSerializer, VenueSerializer
from venues.services import VenueService
from venues.stores import get_venue_store

logger = logging.getLogger(__name__)


def error_response(error: DomainError) -> Response:
    """Map a domain error to its HTTP response."""
    if isinstance(error, InvalidVenueIdError):
        logger.info("Rejected venue id: %s", error.message)
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, VenueNotFoundError):
        status_code = settings.VENUES["NOT_FOUND_STATUS"]
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=status_code,
    )


class VenueAPIView(APIView):
    """Base view that wires a VenueService to the configured store."""

    def get_service(self) -> VenueService:
        return VenueService(get_venue_store())


class VenueListView(VenueAPIView):
    """Handler for GET /venues"""

    def get(self, request: Request) -> Response:
        venues = self.get_service().list_venues()
        return Response(VenueSerializer(venues, many=True).data)


class VenueDetailView(VenueAPIView):
    """Handler for GET /venues/{venue_id}"""

    def get(self, request: Request, venue_id: str) -> Response:
        try:
            venue = self.get_service().get_venue(venue_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(VenueSerializer(venue).data)


class RecommendationListView(VenueAPIView):
    """Handler for GET /venues/{venue_id}/recommendations"""

    def get(self, request: Request, venue_id: str) -> Response:
        try:
            recommendations = self.get_service().get_recommendations(venue_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(SeatRecommendationSerializer(recommendations, many=True).data)

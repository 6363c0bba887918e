"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from venues.domain import SeatRecommendation, Venue, VenueId
from venues.stores import DjangoVenueStore, InMemoryVenueStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def msg_venue() -> Venue:
    return Venue(
        id=VenueId("msg"),
        name="Madison Square Garden",
        recommendations=(
            SeatRecommendation(
                section="104",
                category="Lower Bowl",
                reason="Best resale value & view of stage",
                estimated_price="$250",
                tip="Avoid row 20+ due to rigging obstruction",
            ),
            SeatRecommendation(
                section="200",
                category="Upper Bowl",
                reason="Great value for price-conscious fans",
                estimated_price="$75",
                tip="Bring binoculars for optimal viewing",
            ),
        ),
    )


@pytest.fixture
def yankee_venue() -> Venue:
    return Venue(id=VenueId("yankee"), name="Yankee Stadium")


@pytest.fixture
def memory_store(msg_venue: Venue, yankee_venue: Venue) -> InMemoryVenueStore:
    return InMemoryVenueStore([msg_venue, yankee_venue])


@pytest.fixture
def django_store() -> DjangoVenueStore:
    return DjangoVenueStore()


@pytest.fixture
def venues_settings(settings):
    """Return a setter that overrides keys of settings.VENUES for one test."""

    def override(**values):
        settings.VENUES = {**settings.VENUES, **values}

    return override

"""Unit tests for VenueService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from unittest.mock import Mock

import pytest

from venues.domain.errors import InvalidVenueIdError, VenueNotFoundError
from venues.services import VenueService
from venues.stores import InMemoryVenueStore, VenueStore


class TestVenueService:
    """Tests for VenueService."""

    def test_list_venues_returns_all(self, memory_store, msg_venue, yankee_venue):
        """list_venues delegates to the store."""
        service = VenueService(memory_store)
        assert service.list_venues() == [msg_venue, yankee_venue]

    def test_list_venues_empty_store(self):
        """An empty store yields an empty list, not None."""
        assert VenueService(InMemoryVenueStore()).list_venues() == []

    def test_list_venues_propagates_store_fault(self):
        """Store failures surface unchanged."""
        store = Mock(spec=VenueStore)
        store.list_venues.side_effect = RuntimeError("Database connection failed")

        with pytest.raises(RuntimeError, match="Database connection failed"):
            VenueService(store).list_venues()

    def test_get_venue_returns_venue(self, memory_store, msg_venue):
        venue = VenueService(memory_store).get_venue("msg")
        assert venue == msg_venue
        assert len(venue.recommendations) == 2

    def test_get_venue_without_recommendations(self, memory_store):
        venue = VenueService(memory_store).get_venue("yankee")
        assert venue.name == "Yankee Stadium"
        assert venue.recommendations == ()

    def test_get_venue_not_found_raises_error(self, memory_store):
        """get_venue raises VenueNotFoundError when store returns None."""
        with pytest.raises(VenueNotFoundError) as exc_info:
            VenueService(memory_store).get_venue("nonexistent")
        assert exc_info.value.message == "Venue not found with id: nonexistent"

    def test_get_venue_is_case_sensitive(self, memory_store):
        with pytest.raises(VenueNotFoundError):
            VenueService(memory_store).get_venue("MSG")

    def test_get_venue_none_id_raises_not_found(self, memory_store):
        with pytest.raises(VenueNotFoundError) as exc_info:
            VenueService(memory_store).get_venue(None)
        assert exc_info.value.message == "Venue not found with id: None"

    def test_get_venue_empty_id_raises_not_found(self, memory_store):
        with pytest.raises(VenueNotFoundError) as exc_info:
            VenueService(memory_store).get_venue("")
        assert exc_info.value.message == "Venue not found with id: "

    def test_get_venue_invalid_id_skips_store(self):
        """get_venue raises InvalidVenueIdError without consulting the store."""
        store = Mock(spec=VenueStore)

        with pytest.raises(InvalidVenueIdError):
            VenueService(store).get_venue("msg garden")
        store.get_venue.assert_not_called()

    def test_get_recommendations_in_order(self, memory_store, msg_venue):
        recommendations = VenueService(memory_store).get_recommendations("msg")
        assert recommendations == list(msg_venue.recommendations)
        assert [rec.section for rec in recommendations] == ["104", "200"]

    def test_get_recommendations_venue_not_found(self, memory_store):
        """get_recommendations raises VenueNotFoundError when the venue doesn't exist."""
        with pytest.raises(VenueNotFoundError):
            VenueService(memory_store).get_recommendations("nonexistent")

    def test_get_recommendations_invalid_id_skips_store(self):
        store = Mock(spec=VenueStore)

        with pytest.raises(InvalidVenueIdError):
            VenueService(store).get_recommendations("msg\ngarden")
        store.venue_exists.assert_not_called()
        store.get_recommendations_for_venue.assert_not_called()

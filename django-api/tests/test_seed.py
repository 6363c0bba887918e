"""Tests for seed data and the seed_venues management command.

Run with: pytest tests/test_seed.py -v
"""

import json

import pytest
from django.core.management import CommandError, call_command

from venues import models
from venues.domain import VenueId
from venues.seed import load_seed_venues

SEED_IDS = [
    "msg",
    "yankee",
    "barclays",
    "redrocks",
    "radiocity",
    "citi",
    "att",
    "crypto",
    "scg",
    "marvel",
]


class TestSeedData:
    """Tests for the bundled seed venues."""

    def test_seed_ids(self):
        assert [venue.id.value for venue in load_seed_venues()] == SEED_IDS

    def test_seed_msg_first_recommendation(self):
        msg = load_seed_venues()[0]
        assert msg.name == "Madison Square Garden"
        first = msg.recommendations[0]
        assert (first.section, first.category, first.estimated_price) == ("104", "Lower Bowl", "$250")
        assert first.tip == "Avoid row 20+ due to rigging obstruction"


@pytest.mark.django_db
class TestSeedVenuesCommand:
    """Tests for manage.py seed_venues."""

    def test_seeds_bundled_venues(self, django_store):
        call_command("seed_venues")

        assert [v.id.value for v in django_store.list_venues()] == sorted(SEED_IDS)
        assert django_store.get_venue(VenueId("msg")) == load_seed_venues()[0]

    def test_seeding_twice_does_not_duplicate(self, django_store):
        call_command("seed_venues")
        count = models.SeatRecommendation.objects.count()

        call_command("seed_venues")

        assert models.Venue.objects.count() == 10
        assert models.SeatRecommendation.objects.count() == count

    def test_seeds_from_file(self, django_store, tmp_path):
        path = tmp_path / "venues.json"
        path.write_text(json.dumps([{"id": "msg-arena", "name": "MSG Arena"}]), encoding="utf-8")

        call_command("seed_venues", "--file", str(path))

        assert django_store.get_venue(VenueId("msg-arena")).name == "MSG Arena"

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "venues.json"
        path.write_text(json.dumps([{"name": "No id"}]), encoding="utf-8")

        with pytest.raises(CommandError):
            call_command("seed_venues", "--file", str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(CommandError):
            call_command("seed_venues", "--file", str(tmp_path / "missing.json"))

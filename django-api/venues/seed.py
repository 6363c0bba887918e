"""Seed venues shipped with the app."""

import json
from pathlib import Path

from venues.domain import Venue
from venues.handlers.serializers import VenueSerializer

SEED_FILE = Path(__file__).resolve().parent / "data" / "venues.json"


def load_venues(path: Path | str = SEED_FILE) -> list[Venue]:
    """Parse a JSON array of venues into domain models.

    Raises:
        rest_framework.exceptions.ValidationError: If the file does not hold valid venues.
    """
    with open(path, encoding="utf-8") as fh:
        payload = json.load(fh)
    serializer = VenueSerializer(data=payload, many=True)
    serializer.is_valid(raise_exception=True)
    return serializer.save()


def load_seed_venues() -> list[Venue]:
    return load_venues(SEED_FILE)

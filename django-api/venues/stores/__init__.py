"""Venue stores and the factory the HTTP layer uses to pick one."""

from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from venues.stores.django_store import DjangoVenueStore
from venues.stores.interfaces import VenueStore
from venues.stores.memory_store import InMemoryVenueStore

__all__ = [
    "VenueStore",
    "DjangoVenueStore",
    "InMemoryVenueStore",
    "get_venue_store",
]


@lru_cache(maxsize=1)
def _seeded_memory_store() -> InMemoryVenueStore:
    from venues.seed import load_seed_venues

    return InMemoryVenueStore(load_seed_venues())


def get_venue_store() -> VenueStore:
    """Return the store selected by settings.VENUES["STORE"]."""
    backend = settings.VENUES["STORE"]
    if backend == "django":
        return DjangoVenueStore()
    if backend == "memory":
        return _seeded_memory_store()
    raise ImproperlyConfigured(f"Unknown venue store backend: {backend!r}")

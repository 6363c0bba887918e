import logging

from django.core.management.base import BaseCommand, CommandError
from rest_framework.exceptions import ValidationError

from venues.seed import SEED_FILE, load_venues
from venues.stores import DjangoVenueStore

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Write seed venues into the database, replacing venues with the same id."

    def add_arguments(self, parser):
        parser.add_argument(
            "--file",
            default=str(SEED_FILE),
            help="JSON array of venues to load (defaults to the bundled seed data).",
        )

    def handle(self, *args, **options):
        try:
            venues = load_venues(options["file"])
        except (OSError, ValueError, ValidationError) as exc:
            raise CommandError(f"Could not load venues from {options['file']}: {exc}") from exc

        store = DjangoVenueStore()
        for venue in venues:
            store.save_venue(venue)

        logger.info("Seeded %d venues from %s", len(venues), options["file"])
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(venues)} venues"))

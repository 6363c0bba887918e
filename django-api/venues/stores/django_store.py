"""Django ORM implementation of the VenueStore."""

from django.db import transaction

from venues import models
from venues.domain import SeatRecommendation, Venue, VenueId
from venues.stores.interfaces import VenueStore


def _recommendation_to_domain(row: models.SeatRecommendation) -> SeatRecommendation:
    return SeatRecommendation(
        section=row.section,
        category=row.category,
        reason=row.reason,
        estimated_price=row.estimated_price,
        tip=row.tip,
    )


def _venue_to_domain(row: models.Venue) -> Venue:
    # Relies on prefetch_related so recommendations come back in Meta.ordering.
    return Venue(
        id=VenueId(row.id),
        name=row.name,
        recommendations=tuple(
            _recommendation_to_domain(rec) for rec in row.recommendations.all()
        ),
    )


class DjangoVenueStore(VenueStore):
    """Relational venue store using Django ORM."""

    def _venues(self):
        return models.Venue.objects.prefetch_related("recommendations")

    def list_venues(self) -> list[Venue]:
        return [_venue_to_domain(row) for row in self._venues()]

    def get_venue(self, venue_id: VenueId) -> Venue | None:
        row = self._venues().filter(pk=venue_id.value).first()
        if row is None:
            return None
        return _venue_to_domain(row)

    def get_recommendations_for_venue(self, venue_id: VenueId) -> list[SeatRecommendation]:
        rows = models.SeatRecommendation.objects.filter(venue_id=venue_id.value)
        return [_recommendation_to_domain(row) for row in rows]

    def venue_exists(self, venue_id: VenueId) -> bool:
        return models.Venue.objects.filter(pk=venue_id.value).exists()

    @transaction.atomic
    def save_venue(self, venue: Venue) -> None:
        row, created = models.Venue.objects.update_or_create(
            pk=venue.id.value, defaults={"name": venue.name}
        )
        if not created:
            row.recommendations.all().delete()
        models.SeatRecommendation.objects.bulk_create(
            models.SeatRecommendation(
                venue=row,
                section=rec.section,
                category=rec.category,
                reason=rec.reason,
                estimated_price=rec.estimated_price,
                tip=rec.tip,
            )
            for rec in venue.recommendations
        )

    def delete_venue(self, venue_id: VenueId) -> bool:
        deleted, _ = models.Venue.objects.filter(pk=venue_id.value).delete()
        return deleted > 0

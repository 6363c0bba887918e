"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Venue(models.Model):
    """Persistence model for venues."""

    id = models.CharField(primary_key=True, max_length=255)
    name = models.CharField(max_length=255, blank=True, null=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name or self.id


class SeatRecommendation(models.Model):
    """Persistence model for seat recommendations."""

    venue = models.ForeignKey(
        Venue, on_delete=models.CASCADE, related_name="recommendations"
    )
    section = models.CharField(max_length=255, blank=True, null=True)
    category = models.CharField(max_length=255, blank=True, null=True)
    reason = models.TextField(blank=True, null=True)
    estimated_price = models.CharField(max_length=64, blank=True, null=True)
    tip = models.TextField(blank=True, null=True)

    class Meta:
        # Surrogate keys are assigned in insertion order.
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.section} - {self.category}"

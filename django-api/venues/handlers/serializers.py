"""Serializers for transforming domain models to API responses and back."""

from rest_framework import serializers

from venues.domain import SeatRecommendation, Venue, VenueId


class SeatRecommendationSerializer(serializers.Serializer):
    """Serializer for SeatRecommendation domain model."""

    section = serializers.CharField(allow_null=True, allow_blank=True, required=False, default=None)
    category = serializers.CharField(allow_null=True, allow_blank=True, required=False, default=None)
    reason = serializers.CharField(allow_null=True, allow_blank=True, required=False, default=None)
    estimatedPrice = serializers.CharField(
        source="estimated_price", allow_null=True, allow_blank=True, required=False, default=None
    )
    tip = serializers.CharField(allow_null=True, allow_blank=True, required=False, default=None)

    def create(self, validated_data: dict) -> SeatRecommendation:
        return SeatRecommendation(**validated_data)


class VenueSerializer(serializers.Serializer):
    """Serializer for Venue domain model."""

    id = serializers.CharField(source="id.value", trim_whitespace=False)
    name = serializers.CharField(allow_null=True, allow_blank=True, required=False, default=None)
    recommendations = SeatRecommendationSerializer(many=True, required=False, default=list)

    def create(self, validated_data: dict) -> Venue:
        return Venue(
            id=VenueId(validated_data["id"]["value"]),
            name=validated_data.get("name"),
            recommendations=tuple(
                SeatRecommendation(**rec) for rec in validated_data.get("recommendations", [])
            ),
        )

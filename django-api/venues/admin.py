from django.contrib import admin

from venues.models import SeatRecommendation, Venue


class SeatRecommendationInline(admin.TabularInline):
    model = SeatRecommendation
    extra = 1


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ["id", "name"]
    search_fields = ["id", "name"]
    inlines = [SeatRecommendationInline]


@admin.register(SeatRecommendation)
class SeatRecommendationAdmin(admin.ModelAdmin):
    list_display = ["section", "category", "venue", "estimated_price"]
    list_filter = ["venue"]

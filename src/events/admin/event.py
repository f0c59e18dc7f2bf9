"""Admin class for Event."""

from django.contrib import admin

from events import models


@admin.register(models.Event)
class EventAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    """Admin model for Events.

    The age band is read-only: it is derived once when the event is posted.
    """

    list_display = [
        "title",
        "organizer_id",
        "group",
        "post_only_to_group",
        "start_time",
        "min_age",
        "max_age",
        "created_at",
    ]
    list_filter = ["post_only_to_group", "start_time"]
    search_fields = ["title", "location_name", "organizer_id"]
    autocomplete_fields = ["group"]
    readonly_fields = ["min_age", "max_age", "created_at", "updated_at"]
    date_hierarchy = "start_time"

    fieldsets = [
        ("Details", {"fields": ("title", "description", "organizer_id", "group", "post_only_to_group")}),
        ("When & where", {"fields": (("start_time", "end_time"), "location_name", ("latitude", "longitude"))}),
        ("Audience", {"fields": (("min_age", "max_age"),)}),
        ("Metadata", {"fields": ("created_at", "updated_at")}),
    ]

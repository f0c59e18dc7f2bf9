"""Admin classes for groups and profiles."""

from django.contrib import admin

from events import models


@admin.register(models.Profile)
class ProfileAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["user_id", "age", "created_at"]
    search_fields = ["user_id"]


@admin.register(models.Group)
class GroupAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "visibility", "creator_id", "created_at"]
    list_filter = ["visibility"]
    search_fields = ["name", "creator_id"]
    filter_horizontal = ["members"]

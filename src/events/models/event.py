import typing as t
from datetime import datetime

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import F, Q
from django.utils import timezone

from common.models import TimeStampedModel

from .group import Group

DISCOVERY_ORDERING = ("created_at", "id")


class EventQuerySet(models.QuerySet["Event"]):
    def upcoming(self, now: datetime | None = None) -> t.Self:
        """Events that have not started yet."""
        return self.filter(start_time__gt=now or timezone.now())

    def globally_visible(self) -> t.Self:
        """Events not restricted to their group."""
        return self.filter(post_only_to_group=False)

    def in_discovery_order(self) -> t.Self:
        """Stable, monotonic order used to page through discoverable events.

        New events always sort after existing ones, so offsets handed out earlier keep
        pointing at the same rows unless events are deleted or edited in between.
        """
        return self.order_by(*DISCOVERY_ORDERING)

    def discoverable(self, now: datetime | None = None) -> t.Self:
        """Future, globally visible events in discovery order."""
        return self.globally_visible().upcoming(now).in_discovery_order()


class Event(TimeStampedModel):
    title = models.CharField(max_length=150)
    description = models.TextField(blank=True, default="")
    location_name = models.CharField(max_length=255, blank=True, default="")
    start_time = models.DateTimeField(db_index=True)
    end_time = models.DateTimeField()
    latitude = models.FloatField(
        null=True, blank=True, validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)]
    )
    longitude = models.FloatField(
        null=True, blank=True, validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)]
    )
    organizer_id = models.CharField(max_length=128, db_index=True)
    group = models.ForeignKey(Group, on_delete=models.SET_NULL, null=True, blank=True, related_name="events")
    post_only_to_group = models.BooleanField(default=False, db_index=True)
    # Age band, derived once when the event is posted. Inclusive; None means unbounded on that side.
    min_age = models.PositiveSmallIntegerField(null=True, blank=True)
    max_age = models.PositiveSmallIntegerField(null=True, blank=True)

    objects = EventQuerySet.as_manager()

    class Meta:
        constraints = [
            models.CheckConstraint(condition=Q(start_time__lt=F("end_time")), name="event_starts_before_it_ends"),
            models.CheckConstraint(
                condition=Q(min_age__isnull=True) | Q(max_age__isnull=True) | Q(min_age__lte=F("max_age")),
                name="event_age_band_ordered",
            ),
        ]
        indexes = [
            models.Index(fields=["created_at", "id"], name="idx_event_discovery_order"),
            models.Index(fields=["post_only_to_group", "start_time"], name="idx_event_visible_start"),
        ]
        ordering = list(DISCOVERY_ORDERING)

    def __str__(self) -> str:
        return self.title

    def clean(self) -> None:
        """Validate the time window and the age band."""
        super().clean()
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            raise DjangoValidationError({"end_time": "End time must be after start time."})
        if self.min_age is not None and self.max_age is not None and self.min_age > self.max_age:
            raise DjangoValidationError({"max_age": "Maximum age must not be below minimum age."})

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

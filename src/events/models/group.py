from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Avg

from common.models import TimeStampedModel


class Profile(TimeStampedModel):
    """The slice of a user's profile the discovery engine needs: who they are and how old."""

    user_id = models.CharField(max_length=128, unique=True)
    age = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(130)])

    def __str__(self) -> str:
        return f"{self.user_id} ({self.age})"


class Group(TimeStampedModel):
    class Visibility(models.TextChoices):
        OPEN = "open"  # anyone can join
        REQUEST = "request"  # joining requires approval
        HIDDEN = "hidden"  # invite only, not listed

    name = models.CharField(max_length=150)
    description = models.TextField(blank=True, default="")
    creator_id = models.CharField(max_length=128)
    visibility = models.CharField(choices=Visibility.choices, max_length=20, default=Visibility.OPEN)
    members = models.ManyToManyField(Profile, related_name="member_groups", blank=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    @property
    def is_restricted(self) -> bool:
        """Whether events may be posted privately to this group."""
        return self.visibility in (self.Visibility.REQUEST, self.Visibility.HIDDEN)

    def average_member_age(self) -> float | None:
        """Mean age of the group's members, or None for an empty group."""
        return self.members.aggregate(average=Avg("age"))["average"]  # type: ignore[no-any-return]

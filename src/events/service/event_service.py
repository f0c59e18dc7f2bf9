"""Event posting: the flow that attaches an age band to every new event."""

import structlog
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from events.conf import default_average_age
from events.models import Event, Group
from events.schema import EventCreateSchema

from .age_band import AgeBand, derive_age_band

logger = structlog.get_logger(__name__)


def average_group_age(group: Group | None) -> float:
    """Average age of the audience an event is posted to.

    Falls back to the configured default when there is no group or the group has no members.
    """
    if group is None:
        return default_average_age()
    average = group.average_member_age()
    return float(average) if average is not None else default_average_age()


def age_band_for_group(group: Group | None) -> AgeBand:
    """Derive the age band an event posted from ``group`` gets."""
    return derive_age_band(average_group_age(group))


@transaction.atomic
def create_event(payload: EventCreateSchema) -> Event:
    """Create an event and stamp its age band.

    The band is computed once, here, and never recomputed afterwards.

    Raises:
        DjangoValidationError: On an unknown group, a group-only post that is not allowed,
            or an invalid time window.
    """
    group: Group | None = None
    if payload.group_id is not None:
        group = Group.objects.filter(pk=payload.group_id).first()
        if group is None:
            raise DjangoValidationError({"group_id": ["Group does not exist."]})

    if payload.post_only_to_group:
        if group is None:
            raise DjangoValidationError({"post_only_to_group": ["Only events posted from a group can be group-only."]})
        if not group.is_restricted:
            raise DjangoValidationError(
                {"post_only_to_group": ["Open groups cannot restrict events to their members."]}
            )

    band = age_band_for_group(group)
    event = Event(
        **payload.model_dump(exclude={"group_id"}),
        group=group,
        min_age=band.min_age,
        max_age=band.max_age,
    )
    event.save()
    logger.info(
        "events.created",
        event_id=event.pk,
        group_id=event.group_id,
        min_age=band.min_age,
        max_age=band.max_age,
        post_only_to_group=event.post_only_to_group,
    )
    return event

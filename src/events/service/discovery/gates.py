"""Eligibility gates for the discovery engine.

Each gate checks one rule and returns the reason an event is ineligible, or None
to let the next gate decide. An event is eligible for a caller iff every gate
passes. Gates are pure: they never touch the database.
"""

import typing as t
from enum import StrEnum

from .types import CallerContext

if t.TYPE_CHECKING:
    from events.models import Event


class Ineligibility(StrEnum):
    """Reasons an event is left out of a caller's ranked page."""

    GROUP_ONLY = "group_only"
    NOT_UPCOMING = "not_upcoming"
    NO_LOCATION = "no_location"
    BELOW_MIN_AGE = "below_min_age"
    ABOVE_MAX_AGE = "above_max_age"


def group_visibility_gate(event: "Event", caller: CallerContext) -> Ineligibility | None:
    """Group-private events are only reachable through their group, never through global ranking."""
    if event.post_only_to_group:
        return Ineligibility.GROUP_ONLY
    return None


def upcoming_gate(event: "Event", caller: CallerContext) -> Ineligibility | None:
    """Events that already started (or ended) are excluded."""
    if event.start_time <= caller.now:
        return Ineligibility.NOT_UPCOMING
    return None


def location_gate(event: "Event", caller: CallerContext) -> Ineligibility | None:
    """Events without coordinates cannot be ranked by distance."""
    if not event.has_location:
        return Ineligibility.NO_LOCATION
    return None


def age_band_gate(event: "Event", caller: CallerContext) -> Ineligibility | None:
    """The caller's age must fall inside the event's band; a missing bound is unbounded."""
    if event.min_age is not None and caller.age < event.min_age:
        return Ineligibility.BELOW_MIN_AGE
    if event.max_age is not None and caller.age > event.max_age:
        return Ineligibility.ABOVE_MAX_AGE
    return None


Gate = t.Callable[["Event", CallerContext], Ineligibility | None]

ELIGIBILITY_GATES: tuple[Gate, ...] = (
    group_visibility_gate,
    upcoming_gate,
    location_gate,
    age_band_gate,
)


def ineligibility_reason(event: "Event", caller: CallerContext) -> Ineligibility | None:
    """Return the first gate that rejects the event, or None if the event is eligible."""
    for gate in ELIGIBILITY_GATES:
        reason = gate(event, caller)
        if reason is not None:
            return reason
    return None


def is_eligible(event: "Event", caller: CallerContext) -> bool:
    return ineligibility_reason(event, caller) is None

from .event import DISCOVERY_ORDERING, Event, EventQuerySet
from .group import Group, Profile

__all__ = [
    "DISCOVERY_ORDERING",
    "Event",
    "EventQuerySet",
    "Group",
    "Profile",
]

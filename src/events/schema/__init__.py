"""Events schema package."""

from .discovery import RankedEventPageSchema, RankedEventSchema, RankEventsSchema
from .event import EventCreateSchema, EventSchema

__all__ = [
    "EventCreateSchema",
    "EventSchema",
    "RankEventsSchema",
    "RankedEventPageSchema",
    "RankedEventSchema",
]

"""Types shared by the discovery engine."""

import typing as t
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

if t.TYPE_CHECKING:
    from events.models import Event


@dataclass(frozen=True)
class CallerContext:
    """Who is asking, from where, and when. Supplied per request, never persisted."""

    user_id: str
    latitude: float
    longitude: float
    age: float
    now: datetime

    @property
    def location(self) -> tuple[float, float]:
        return self.latitude, self.longitude


class StopReason(StrEnum):
    """Why the page assembler stopped reading from the store."""

    PAGE_FULL = "page_full"
    EXHAUSTED = "exhausted"
    READ_CAP = "read_cap"
    DEADLINE = "deadline"


@dataclass
class RankedPage:
    """One page of eligible, distance-annotated events.

    Events keep the order in which they were discovered in the store; they are not
    sorted by distance. Clients that want nearest-first must sort the page themselves.
    """

    events: list["Event"] = field(default_factory=list)
    has_more: bool = False
    next_offset: int | None = None
    stop_reason: StopReason = StopReason.EXHAUSTED
    store_reads: int = 0

"""Event discovery: eligibility filtering, distance annotation and over-fetching pagination."""

from .gates import ELIGIBILITY_GATES, Ineligibility, ineligibility_reason, is_eligible
from .paging import EligibleEventIterator, PageAssembler
from .service import RankingService
from .store import DjangoEventStore, EventStore
from .types import CallerContext, RankedPage, StopReason

__all__ = [
    "ELIGIBILITY_GATES",
    "CallerContext",
    "DjangoEventStore",
    "EligibleEventIterator",
    "EventStore",
    "Ineligibility",
    "PageAssembler",
    "RankedPage",
    "RankingService",
    "StopReason",
    "ineligibility_reason",
    "is_eligible",
]

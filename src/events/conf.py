"""Discovery policies, built from Django settings.

Rule: no ranking logic here, only the tunables and their sanity checks. Settings
are read on every call so overrides (tests, env reloads) take effect immediately.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings


@dataclass(frozen=True)
class AgeBandPolicy:
    """Bounds and spread used to derive an event's age band from an average age."""

    # Nobody below the floor or above the ceiling is ever targeted
    floor: int = 13
    ceiling: int = 100

    # spread = ln(average_age) * spread_multiplier
    spread_multiplier: float = 4.0

    def validate(self) -> None:
        """Basic sanity checks."""
        if self.floor < 0:
            raise ValueError("floor must be >= 0")

        if self.ceiling < self.floor:
            raise ValueError("ceiling must be >= floor")

        if self.spread_multiplier < 0:
            raise ValueError("spread_multiplier must be >= 0")


@dataclass(frozen=True)
class PagingPolicy:
    """Knobs for the over-fetching page assembler."""

    # Each store round-trip asks for overfetch_multiplier * page_size rows
    overfetch_multiplier: int = 2

    default_page_size: int = 25
    max_page_size: int = 100

    # Iteration cap: a request gives up with a partial page after this many store reads
    max_store_reads: int = 10

    # Wall-clock budget per request, in seconds. 0 disables the deadline.
    request_budget_seconds: float = 5.0

    def validate(self) -> None:
        """Basic sanity checks."""
        if self.overfetch_multiplier < 1:
            raise ValueError("overfetch_multiplier must be >= 1")

        if self.default_page_size < 1:
            raise ValueError("default_page_size must be >= 1")

        if self.max_page_size < self.default_page_size:
            raise ValueError("max_page_size must be >= default_page_size")

        if self.max_store_reads < 1:
            raise ValueError("max_store_reads must be >= 1")

        if self.request_budget_seconds < 0:
            raise ValueError("request_budget_seconds must be >= 0")

    def batch_size(self, page_size: int) -> int:
        """Rows requested from the store per round-trip for a given page size."""
        return page_size * self.overfetch_multiplier


def age_band_policy() -> AgeBandPolicy:
    """The age band policy configured in settings."""
    policy = AgeBandPolicy(
        floor=settings.DISCOVERY_MIN_AGE,
        ceiling=settings.DISCOVERY_MAX_AGE,
        spread_multiplier=settings.DISCOVERY_AGE_SPREAD_MULTIPLIER,
    )
    policy.validate()
    return policy


def paging_policy() -> PagingPolicy:
    """The paging policy configured in settings."""
    policy = PagingPolicy(
        overfetch_multiplier=settings.DISCOVERY_OVERFETCH_MULTIPLIER,
        default_page_size=settings.DISCOVERY_DEFAULT_PAGE_SIZE,
        max_page_size=settings.DISCOVERY_MAX_PAGE_SIZE,
        max_store_reads=settings.DISCOVERY_MAX_STORE_READS,
        request_budget_seconds=settings.DISCOVERY_REQUEST_BUDGET_SECONDS,
    )
    policy.validate()
    return policy


def default_average_age() -> float:
    """Average age assumed when an event has no group (or the group has no members)."""
    return float(settings.DISCOVERY_DEFAULT_AVERAGE_AGE)

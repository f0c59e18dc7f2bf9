"""Read access to discoverable events."""

import typing as t
from datetime import datetime

import structlog
from django.db import DatabaseError

from events.exceptions import StoreError
from events.models import Event, EventQuerySet

logger = structlog.get_logger(__name__)


class EventStore(t.Protocol):
    """What the page assembler needs from storage.

    ``fetch`` returns up to ``limit`` future, globally visible events starting at
    position ``offset`` of a stable, deterministic order. Returning fewer than
    ``limit`` rows means the store is exhausted.
    """

    def fetch(self, offset: int, limit: int, now: datetime) -> t.Sequence[Event]: ...


class DjangoEventStore:
    """EventStore backed by the Event table, ordered by (created_at, id).

    Offsets are positions in that order. Events inserted while a client pages sort
    after every existing row, but edits or deletions between two page requests can
    still shift positions: a client may then see an event twice or miss one. This
    best-effort consistency is accepted; there is no snapshot across requests.
    """

    def __init__(self, queryset: EventQuerySet | None = None) -> None:
        """Initialize the store, optionally narrowed to a custom queryset."""
        self.queryset = queryset if queryset is not None else Event.objects.all()

    def fetch(self, offset: int, limit: int, now: datetime) -> list[Event]:
        """Read one batch of discoverable events.

        Raises:
            StoreError: If the database read fails.
        """
        try:
            return list(self.queryset.discoverable(now)[offset : offset + limit])
        except DatabaseError as e:
            logger.error("events.store_read_failed", offset=offset, limit=limit, exc_info=True)
            raise StoreError(str(e) or "Event store read failed.") from e

"""Over-fetching pagination over the event store.

Most stored events fail a given caller's eligibility checks, so a store read of
``page_size`` rows rarely fills a page. The iterator below reads oversized
batches, filters them, and hands out eligible events one at a time. The page
assembler pulls from it until the page is full, the store runs dry, or a read
cap / deadline ends the scan early.
"""

import itertools
import time
import typing as t
from collections import deque

import structlog

from events.conf import PagingPolicy, paging_policy
from events.models import Event
from geo.service import haversine_miles

from .gates import is_eligible
from .store import DjangoEventStore, EventStore
from .types import CallerContext, RankedPage, StopReason

logger = structlog.get_logger(__name__)


class EligibleEventIterator:
    """A pull-based, restartable sequence of eligible events.

    Each yielded event carries a ``distance`` attribute (miles from the caller).
    Store reads happen lazily, one batch at a time, and only when the buffer of
    already-filtered events is empty. A batch shorter than requested marks the
    store as exhausted.

    To restart where a consumer stopped, build a new iterator at ``resume_offset``.
    """

    def __init__(
        self,
        store: EventStore,
        caller: CallerContext,
        *,
        start: int = 0,
        batch_size: int,
        max_reads: int,
        deadline: float | None = None,
        clock: t.Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the iterator.

        Args:
            store: Where batches come from.
            caller: Eligibility and distance are evaluated against this context.
            start: Store position to start scanning from.
            batch_size: Rows requested per store read.
            max_reads: Iteration cap; no more than this many store reads are made.
            deadline: Value of ``clock()`` after which no new read is started.
            clock: Monotonic clock, injectable for tests.
        """
        self.store = store
        self.caller = caller
        self.batch_size = batch_size
        self.max_reads = max_reads
        self.deadline = deadline
        self._clock = clock

        self.scan_offset = start
        self.reads = 0
        self.exhausted = False
        self.stop_reason: StopReason | None = None
        self._buffer: deque[tuple[int, Event]] = deque()

    def __iter__(self) -> "EligibleEventIterator":
        return self

    def __next__(self) -> Event:
        while not self._buffer:
            if self.exhausted:
                self.stop_reason = StopReason.EXHAUSTED
                raise StopIteration
            if self.reads >= self.max_reads:
                self.stop_reason = StopReason.READ_CAP
                raise StopIteration
            if self.deadline is not None and self._clock() >= self.deadline:
                self.stop_reason = StopReason.DEADLINE
                raise StopIteration
            self._read_batch()
        _, event = self._buffer.popleft()
        return event

    def _read_batch(self) -> None:
        batch = self.store.fetch(self.scan_offset, self.batch_size, self.caller.now)
        self.reads += 1
        for position, event in enumerate(batch, start=self.scan_offset):
            if not is_eligible(event, self.caller):
                continue
            event.distance = haversine_miles(self.caller.location, (event.latitude, event.longitude))  # type: ignore[attr-defined,arg-type]
            self._buffer.append((position, event))
        self.scan_offset += len(batch)
        if len(batch) < self.batch_size:
            self.exhausted = True

    @property
    def has_pending(self) -> bool:
        """Whether eligible events may still come: some are buffered, or the store is not exhausted."""
        return bool(self._buffer) or not self.exhausted

    @property
    def resume_offset(self) -> int:
        """Store position from which a new iterator continues without skipping anything.

        That is the position of the first buffered (not yet handed out) event, or the
        scan position when nothing is buffered.
        """
        if self._buffer:
            return self._buffer[0][0]
        return self.scan_offset


class PageAssembler:
    """Fills a page of eligible events from the store, over-fetching to beat filter attrition."""

    def __init__(
        self,
        store: EventStore | None = None,
        policy: PagingPolicy | None = None,
        clock: t.Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the assembler.

        Args:
            store: The event store. Defaults to the database.
            policy: Over-fetch, page size and cap settings. Defaults to the settings.
            clock: Monotonic clock used for the request deadline.
        """
        self.store = store if store is not None else DjangoEventStore()
        self.policy = policy or paging_policy()
        self._clock = clock

    def iterate(self, caller: CallerContext, *, offset: int = 0, page_size: int) -> EligibleEventIterator:
        """Build an eligible-event iterator for one request."""
        deadline = None
        if self.policy.request_budget_seconds:
            deadline = self._clock() + self.policy.request_budget_seconds
        return EligibleEventIterator(
            self.store,
            caller,
            start=offset,
            batch_size=self.policy.batch_size(page_size),
            max_reads=self.policy.max_store_reads,
            deadline=deadline,
            clock=self._clock,
        )

    def assemble(self, caller: CallerContext, *, offset: int = 0, page_size: int | None = None) -> RankedPage:
        """Assemble one page.

        Exit conditions, in priority order:
            1. ``page_size`` eligible events collected -> more data may remain.
            2. The store returned a short batch -> exhausted.
            3. The read cap or the deadline was hit -> partial page, more data may remain.

        ``next_offset`` is None (and ``has_more`` False) only when the store is
        exhausted and every eligible event it returned is on this page.

        Raises:
            StoreError: If any store read fails. No partial page is returned.
        """
        page_size = page_size or self.policy.default_page_size
        iterator = self.iterate(caller, offset=offset, page_size=page_size)
        events = list(itertools.islice(iterator, page_size))

        stop_reason = StopReason.PAGE_FULL if len(events) == page_size else iterator.stop_reason
        has_more = iterator.has_pending
        return RankedPage(
            events=events,
            has_more=has_more,
            next_offset=iterator.resume_offset if has_more else None,
            stop_reason=stop_reason or StopReason.EXHAUSTED,
            store_reads=iterator.reads,
        )

"""RankingService: request validation and page assembly for event discovery."""

from datetime import datetime

import structlog
from django.utils import timezone

from events.exceptions import RankingValidationError
from events.schema import RankEventsSchema

from .paging import PageAssembler
from .types import CallerContext, RankedPage

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ("user_id", "latitude", "longitude", "age")


class RankingService:
    """Turns a ranking request into a page of nearby, age-appropriate upcoming events.

    Stateless: one instance may serve any number of concurrent requests.
    """

    def __init__(self, assembler: PageAssembler | None = None) -> None:
        """Initialize the service with an optional custom page assembler."""
        self.assembler = assembler or PageAssembler()

    def rank(self, payload: RankEventsSchema, *, now: datetime | None = None) -> RankedPage:
        """Validate the request and return one page of ranked events.

        Validation happens before any store access.

        Raises:
            RankingValidationError: If a required field is missing or the page size is out of range.
            StoreError: If the event store cannot be read.
        """
        missing = [name for name in REQUIRED_FIELDS if getattr(payload, name) in (None, "")]
        if missing:
            raise RankingValidationError(missing_fields=missing)

        policy = self.assembler.policy
        page_size = payload.page_size or policy.default_page_size
        if page_size > policy.max_page_size:
            raise RankingValidationError(f"pageSize must be between 1 and {policy.max_page_size}.")

        caller = CallerContext(
            user_id=payload.user_id,  # type: ignore[arg-type]
            latitude=payload.latitude,  # type: ignore[arg-type]
            longitude=payload.longitude,  # type: ignore[arg-type]
            age=payload.age,  # type: ignore[arg-type]
            now=now or timezone.now(),
        )
        page = self.assembler.assemble(caller, offset=payload.offset, page_size=page_size)
        logger.info(
            "events.ranked",
            user_id=caller.user_id,
            offset=payload.offset,
            page_size=page_size,
            returned=len(page.events),
            store_reads=page.store_reads,
            stop_reason=page.stop_reason,
            next_offset=page.next_offset,
        )
        return page

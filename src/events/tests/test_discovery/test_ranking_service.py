import typing as t
from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from django.utils import timezone
from freezegun import freeze_time

from conftest import CALLER_LATITUDE, CALLER_LONGITUDE, EventFactory
from events.conf import PagingPolicy
from events.exceptions import RankingValidationError, StoreError
from events.models import Group
from events.schema import RankEventsSchema
from events.service.discovery import PageAssembler, RankingService

pytestmark = pytest.mark.django_db


def rank_request(**overrides: t.Any) -> RankEventsSchema:
    data: dict[str, t.Any] = {
        "user_id": "user-1",
        "userLatitude": CALLER_LATITUDE,
        "userLongitude": CALLER_LONGITUDE,
        "userAge": 30,
    }
    data.update(overrides)
    return RankEventsSchema.model_validate({k: v for k, v in data.items() if v is not ...})


@pytest.mark.parametrize(
    "missing,field",
    [
        ({"user_id": ...}, "user_id"),
        ({"user_id": ""}, "user_id"),
        ({"user_id": "   "}, "user_id"),
        ({"userLatitude": ...}, "latitude"),
        ({"userLongitude": ...}, "longitude"),
        ({"userAge": ...}, "age"),
    ],
)
def test_missing_fields_are_rejected_before_any_store_read(missing: dict[str, t.Any], field: str) -> None:
    assembler = MagicMock(spec=PageAssembler)

    with pytest.raises(RankingValidationError, match="Missing required parameters") as exc_info:
        RankingService(assembler).rank(rank_request(**missing))

    assert exc_info.value.missing_fields == [field]
    assembler.assemble.assert_not_called()


def test_zero_coordinates_and_age_are_not_missing(event_factory: EventFactory) -> None:
    """0 is a valid latitude, longitude and age; only absent or blank values count as missing."""
    event_factory(latitude=0.0, longitude=0.0, min_age=None, max_age=None)

    page = RankingService().rank(rank_request(userLatitude=0, userLongitude=0, userAge=0))

    assert len(page.events) == 1
    assert page.events[0].distance == pytest.approx(0.0)  # type: ignore[attr-defined]


def test_page_size_above_the_maximum_is_rejected() -> None:
    assembler = MagicMock(spec=PageAssembler)
    assembler.policy = PagingPolicy(max_page_size=50)

    with pytest.raises(RankingValidationError, match="pageSize"):
        RankingService(assembler).rank(rank_request(pageSize=51))
    assembler.assemble.assert_not_called()


def test_returns_only_eligible_events(event_factory: EventFactory, group: Group) -> None:
    visible = event_factory(min_age=18, max_age=40)
    event_factory(min_age=40, max_age=60)
    event_factory(group=group, post_only_to_group=True, min_age=18, max_age=40)
    event_factory(latitude=None, longitude=None)
    event_factory(start_time=timezone.now() - timedelta(hours=1))
    open_ended = event_factory()

    page = RankingService().rank(rank_request())

    assert [e.pk for e in page.events] == [visible.pk, open_ended.pk]
    assert page.has_more is False
    assert page.next_offset is None


def test_paging_through_all_results(event_factory: EventFactory) -> None:
    created = [event_factory(min_age=18, max_age=40) if i % 2 else event_factory(min_age=60) for i in range(20)]
    expected = [e.pk for i, e in enumerate(created) if i % 2]

    service = RankingService()
    seen: list[int] = []
    offset: int | None = 0
    while offset is not None:
        page = service.rank(rank_request(offset=offset, pageSize=3))
        seen.extend(e.pk for e in page.events)
        offset = page.next_offset

    assert seen == expected


def test_uses_the_request_time(event_factory: EventFactory) -> None:
    starts_soon = event_factory(start_time=timezone.now() + timedelta(hours=1))

    assert [e.pk for e in RankingService().rank(rank_request()).events] == [starts_soon.pk]
    with freeze_time(timezone.now() + timedelta(hours=2)):
        assert RankingService().rank(rank_request()).events == []


def test_store_errors_propagate() -> None:
    assembler = MagicMock(spec=PageAssembler)
    assembler.policy = PagingPolicy()
    assembler.assemble.side_effect = StoreError("connection refused")

    with pytest.raises(StoreError):
        RankingService(assembler).rank(rank_request())


def test_default_page_size_from_settings(settings: t.Any, event_factory: EventFactory) -> None:
    settings.DISCOVERY_DEFAULT_PAGE_SIZE = 2
    for _ in range(3):
        event_factory()

    page = RankingService().rank(rank_request())

    assert len(page.events) == 2
    assert page.has_more is True

from datetime import datetime, timedelta

import pytest
from django.contrib import admin
from django.core.exceptions import ValidationError
from django.utils import timezone

from conftest import EventFactory, ProfileFactory
from events.models import Event, Group, Profile

pytestmark = pytest.mark.django_db


class TestEvent:
    def test_end_must_follow_start(self, event_factory: EventFactory, next_week: datetime) -> None:
        with pytest.raises(ValidationError) as exc_info:
            event_factory(start_time=next_week, end_time=next_week)

        assert "end_time" in exc_info.value.message_dict

    def test_age_band_must_be_ordered(self, event_factory: EventFactory) -> None:
        with pytest.raises(ValidationError) as exc_info:
            event_factory(min_age=40, max_age=20)

        assert "max_age" in exc_info.value.message_dict

    def test_coordinates_are_range_checked(self, event_factory: EventFactory) -> None:
        with pytest.raises(ValidationError) as exc_info:
            event_factory(latitude=95.0)

        assert "latitude" in exc_info.value.message_dict

    def test_has_location(self, event_factory: EventFactory) -> None:
        assert event_factory().has_location
        assert not event_factory(latitude=None, longitude=None).has_location

    def test_default_ordering_is_creation_order(self, event_factory: EventFactory) -> None:
        events = [event_factory() for _ in range(3)]

        assert list(Event.objects.all()) == events


class TestEventQuerySet:
    def test_discoverable(self, event_factory: EventFactory, group: Group) -> None:
        now = timezone.now()
        upcoming = event_factory()
        event_factory(start_time=now - timedelta(minutes=1))
        event_factory(group=group, post_only_to_group=True)
        unlocated = event_factory(latitude=None, longitude=None)

        # Location and age are checked per caller, not in the query
        assert list(Event.objects.discoverable(now)) == [upcoming, unlocated]

    def test_event_starting_exactly_now_is_not_upcoming(self, event_factory: EventFactory) -> None:
        now = timezone.now()
        event_factory(start_time=now)

        assert not Event.objects.upcoming(now).exists()

    def test_group_deletion_keeps_events(self, event_factory: EventFactory, group: Group) -> None:
        event = event_factory(group=group)
        group.delete()

        event.refresh_from_db()
        assert event.group is None


class TestGroup:
    def test_is_restricted(self) -> None:
        assert not Group(name="a", creator_id="c", visibility=Group.Visibility.OPEN).is_restricted
        assert Group(name="b", creator_id="c", visibility=Group.Visibility.REQUEST).is_restricted
        assert Group(name="c", creator_id="c", visibility=Group.Visibility.HIDDEN).is_restricted

    def test_average_member_age(self, group: Group, profile_factory: ProfileFactory) -> None:
        assert group.average_member_age() == pytest.approx(30.0)

        group.members.add(profile_factory(age=50))

        assert group.average_member_age() == pytest.approx(35.0)

    def test_average_member_age_of_empty_group(self) -> None:
        assert Group.objects.create(name="Empty", creator_id="c").average_member_age() is None


@pytest.mark.parametrize("model", [Event, Group, Profile])
def test_models_are_registered_in_admin(model: type) -> None:
    assert admin.site.is_registered(model)

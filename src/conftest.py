"""
Shared fixtures for the radar test suite.
"""

import secrets
import string
import typing as t
from datetime import datetime, time, timedelta

import faker
import pytest
from django.utils import timezone

from events.models import Event, Group, Profile
from events.service.discovery import CallerContext

# Downtown Chicago; the default caller location throughout the tests
CALLER_LATITUDE = 41.8781
CALLER_LONGITUDE = -87.6298


class EventFactory:
    """Factory for creating Event instances for testing.

    Unless overridden, events are globally visible, start next week, sit close to
    the default caller, and are open to every age.
    """

    fake = faker.Faker()

    def create_event(self, **kwargs: t.Any) -> Event:
        start_time = kwargs.pop("start_time", timezone.now() + timedelta(days=7))
        end_time = kwargs.pop("end_time", start_time + timedelta(hours=3))
        latitude = kwargs.pop("latitude", float(self.fake.coordinate(center=CALLER_LATITUDE, radius=0.05)))
        longitude = kwargs.pop("longitude", float(self.fake.coordinate(center=CALLER_LONGITUDE, radius=0.05)))
        return Event.objects.create(
            title=kwargs.pop("title", self.fake.sentence(nb_words=4)[:150]),
            description=kwargs.pop("description", self.fake.paragraph()),
            location_name=kwargs.pop("location_name", self.fake.street_address()),
            organizer_id=kwargs.pop("organizer_id", self.fake.uuid4()),
            start_time=start_time,
            end_time=end_time,
            latitude=latitude,
            longitude=longitude,
            **kwargs,
        )

    def __call__(self, **kwargs: t.Any) -> Event:
        return self.create_event(**kwargs)


class ProfileFactory:
    """Factory for creating Profile instances for testing."""

    def create_profile(self, **kwargs: t.Any) -> Profile:
        user_id = kwargs.pop("user_id", "user-" + "".join(secrets.choice(string.ascii_lowercase) for _ in range(10)))
        age = kwargs.pop("age", 30)
        return Profile.objects.create(user_id=user_id, age=age, **kwargs)

    def __call__(self, **kwargs: t.Any) -> Profile:
        return self.create_profile(**kwargs)


@pytest.fixture
def event_factory() -> EventFactory:
    return EventFactory()


@pytest.fixture
def profile_factory() -> ProfileFactory:
    return ProfileFactory()


@pytest.fixture
def group(profile_factory: ProfileFactory) -> Group:
    """A request-to-join group whose members average 30 years of age."""
    group = Group.objects.create(name="Chess Club", creator_id="creator", visibility=Group.Visibility.REQUEST)
    group.members.add(profile_factory(age=20), profile_factory(age=30), profile_factory(age=40))
    return group


@pytest.fixture
def open_group(profile_factory: ProfileFactory) -> Group:
    group = Group.objects.create(name="Running Club", creator_id="creator", visibility=Group.Visibility.OPEN)
    group.members.add(profile_factory(age=25))
    return group


@pytest.fixture
def caller() -> CallerContext:
    """A 30-year-old caller in downtown Chicago."""
    return CallerContext(
        user_id="caller-1",
        latitude=CALLER_LATITUDE,
        longitude=CALLER_LONGITUDE,
        age=30,
        now=timezone.now(),
    )


@pytest.fixture
def next_week() -> datetime:
    today = timezone.now()
    same_time_next_week = today + timedelta(days=7)
    noon = time(hour=12, minute=0)
    return timezone.make_aware(
        datetime.combine(same_time_next_week.date(), noon),
        timezone.get_current_timezone(),
    )

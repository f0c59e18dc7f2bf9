"""Event-related schemas."""

from ninja import ModelSchema, Schema
from pydantic import AwareDatetime, Field

from common.schema import OneToOneFiftyString, StrippedString, UserIdString
from events.models import Event

EVENT_FIELDS = [
    "id",
    "title",
    "description",
    "location_name",
    "start_time",
    "end_time",
    "latitude",
    "longitude",
    "organizer_id",
    "post_only_to_group",
    "min_age",
    "max_age",
    "created_at",
]


class EventSchema(ModelSchema):
    group_id: int | None = None

    class Meta:
        model = Event
        fields = EVENT_FIELDS


class EventCreateSchema(Schema):
    organizer_id: UserIdString
    title: OneToOneFiftyString
    description: StrippedString = ""
    location_name: StrippedString = ""
    start_time: AwareDatetime
    end_time: AwareDatetime
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    group_id: int | None = Field(None, description="Group the event is posted from, if any")
    post_only_to_group: bool = Field(False, description="Only show the event inside its group")

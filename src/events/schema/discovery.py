"""Schemas for ranked event discovery.

The request body keeps the camelCase keys mobile clients already send.
"""

from ninja import Schema
from pydantic import Field

from common.schema import StrippedString

from .event import EventSchema


class RankEventsSchema(Schema):
    # Required fields are optional here so their absence yields our 400, not a schema error
    user_id: StrippedString | None = None
    latitude: float | None = Field(None, alias="userLatitude", ge=-90, le=90)
    longitude: float | None = Field(None, alias="userLongitude", ge=-180, le=180)
    age: float | None = Field(None, alias="userAge", ge=0, le=150)
    offset: int = Field(0, ge=0, description="Cursor returned as next_offset by the previous page")
    page_size: int | None = Field(None, alias="pageSize", ge=1)


class RankedEventSchema(EventSchema):
    distance: float = Field(..., description="Great-circle distance from the caller, in miles")


class RankedEventPageSchema(Schema):
    events: list[RankedEventSchema]
    has_more: bool
    next_offset: int | None

import typing as t

from ninja_extra import ControllerBase, api_controller, route

from common.schema import ErrorResponse, ValidationErrorResponse
from events import models, schema
from events.service import event_service
from events.service.discovery import RankedPage, RankingService


@api_controller("/events", tags=["Events"])
class EventController(ControllerBase):
    @route.post(
        "/rank",
        url_name="rank_events",
        response={200: schema.RankedEventPageSchema, 400: ErrorResponse, 500: ErrorResponse},
    )
    def rank_events(self, payload: schema.RankEventsSchema) -> tuple[int, RankedPage]:
        """Get one page of upcoming events near the caller that fit their age.

        Only events that are publicly listed (not group-only), start in the future, have
        coordinates and whose age band contains `userAge` are returned. Each event carries
        `distance`, in miles from (`userLatitude`, `userLongitude`).

        Events come in discovery order, not nearest-first; sort client-side if needed.
        Pass `next_offset` back as `offset` to get the next page. `next_offset` is null once
        there is nothing left. Pages are best-effort: events created, edited or deleted
        between two page requests may show up twice or be skipped.
        """
        return 200, RankingService().rank(payload)

    @route.post(
        "/",
        url_name="create_event",
        response={201: schema.EventSchema, 400: ValidationErrorResponse},
    )
    def create_event(self, payload: schema.EventCreateSchema) -> tuple[int, models.Event]:
        """Post a new event.

        The event's age band is derived from the average age of the posting group (or a
        default when posted without a group) and stored with the event. Group-only events
        require a group that is not open.
        """
        return 201, event_service.create_event(payload)

    @route.get("/{int:event_id}", url_name="get_event", response=schema.EventSchema)
    def get_event(self, event_id: int) -> models.Event:
        """Retrieve a single event with its age band."""
        return t.cast(models.Event, self.get_object_or_exception(models.Event, pk=event_id))

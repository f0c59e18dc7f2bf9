from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpRequest
from ninja.errors import ValidationError as NinjaValidationError
from ninja_extra import NinjaExtraAPI

from common.schema import VersionResponse
from events.controllers.events import EventController
from events.exceptions import InvalidInputError, RankingValidationError, StoreError

from .exception_handlers import (
    handle_django_validation_error,
    handle_general_exception,
    handle_invalid_input_error,
    handle_ranking_validation_error,
    handle_request_schema_error,
    handle_store_error,
)

api = NinjaExtraAPI(
    title="Radar Backend API",
    docs_url="/docs",
    version=settings.VERSION,
    description=f"Radar API {settings.VERSION}",
    app_name=f"radar-api-{settings.VERSION}",
    urls_namespace="api",
    servers=[
        {"url": settings.SERVICE_URL, "description": settings.SERVICE_DESCRIPTION},
    ],
)


@api.get("/version", tags=["Version"], response={200: VersionResponse})
def version(request: HttpRequest) -> tuple[int, VersionResponse]:
    """Get the API version.

    Args:
        request: The incoming HTTP request.

    Returns:
        The response status code and message.
    """
    return 200, VersionResponse(version=settings.VERSION)


api.register_controllers(
    EventController,
)

EXCEPTION_HANDLERS = {
    Exception: handle_general_exception,
    ValidationError: handle_django_validation_error,
    NinjaValidationError: handle_request_schema_error,
    RankingValidationError: handle_ranking_validation_error,
    StoreError: handle_store_error,
    InvalidInputError: handle_invalid_input_error,
}

for exc, handler in EXCEPTION_HANDLERS.items():
    api.add_exception_handler(exc, handler)

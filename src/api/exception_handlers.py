"""Exception handlers for the API."""

import traceback
import typing as t
from copy import deepcopy

import orjson
import structlog
from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpRequest
from ninja.errors import ValidationError as NinjaValidationError
from ninja.responses import Response

from events.exceptions import InvalidInputError, RankingValidationError, StoreError

logger = structlog.get_logger(__name__)


def handle_general_exception(request: HttpRequest, exc: Exception | t.Type[Exception]) -> Response:
    """Handle a general exception.

    Args:
        request: The incoming HTTP request.
        exc: The exception.

    Returns:
        The response.
    """
    json_payload = None
    if request.method in ("POST", "PUT", "PATCH") and request.headers.get("Content-Type") == "application/json":
        try:
            body = orjson.loads(request.body)
            json_payload = obfuscate(body) if isinstance(body, dict) else body
        except orjson.JSONDecodeError:  # pragma: no cover
            json_payload = None
    logger.exception(
        "INTERNAL_SERVER_ERROR",
        method=request.method,
        path=request.path,
        headers=obfuscate(dict(request.headers)),
        GET=obfuscate(request.GET.dict()),
        json_payload=json_payload,
        exc_info=True,
        stack_info=True,
    )
    data = {"detail": "Internal Server Error."}
    if settings.DEBUG:  # pragma: no cover
        data["traceback"] = traceback.format_exc()
    return Response(status=500, data=data)


def handle_django_validation_error(request: HttpRequest, exc: ValidationError | t.Type[ValidationError]) -> Response:
    """Handle a validation error.

    Args:
        request: The incoming HTTP request.
        exc: The exception.
    """
    logger.warning("VALIDATION_ERROR", path=request.path, errors=getattr(exc, "message_dict", None))
    if not hasattr(exc, "error_dict"):
        return Response(status=400, data={"errors": {"__all__": list(exc.messages)}})  # type: ignore[union-attr]
    error_dict = {k: [ee for e in v for ee in e] for k, v in exc.error_dict.items()}
    return Response(status=400, data={"errors": error_dict})


def handle_request_schema_error(
    request: HttpRequest, exc: NinjaValidationError | t.Type[NinjaValidationError]
) -> Response:
    """Handle a request body that does not match its schema (wrong types, out-of-range values)."""
    logger.warning("REQUEST_SCHEMA_ERROR", path=request.path, errors=exc.errors)  # type: ignore[union-attr]
    return Response(status=400, data={"error": "Invalid request parameters", "detail": exc.errors})  # type: ignore[union-attr]


def handle_ranking_validation_error(
    request: HttpRequest, exc: RankingValidationError | t.Type[RankingValidationError]
) -> Response:
    """Handle a ranking request with missing or unusable fields."""
    logger.info("RANKING_REQUEST_REJECTED", reason=str(exc), missing_fields=exc.missing_fields)  # type: ignore[union-attr]
    return Response(status=400, data={"error": str(exc)})


def handle_store_error(request: HttpRequest, exc: StoreError | t.Type[StoreError]) -> Response:
    """Handle an event store read failure. The client may retry the whole request."""
    logger.error("STORE_ERROR", path=request.path, error=str(exc))
    return Response(status=500, data={"error": str(exc)})


def handle_invalid_input_error(request: HttpRequest, exc: InvalidInputError | t.Type[InvalidInputError]) -> Response:
    """Handle an age band derivation that received a bad average age. This is a server-side bug."""
    logger.error("INVALID_AGE_BAND_INPUT", path=request.path, error=str(exc), exc_info=True)
    return Response(status=500, data={"error": str(exc)})


SENSITIVE_KEYS = {
    "password",
    "token",
    "x-api-key",
    "authorization",
    "authentication",
    "cookie",
    # Caller location
    "userlatitude",
    "userlongitude",
}


def obfuscate(data: dict[str, t.Any]) -> dict[str, t.Any]:
    """Obfuscate sensitive data in payloads and headers."""
    new_data = deepcopy(data)
    for key in data.keys():
        if key.lower() in SENSITIVE_KEYS:
            new_data[key] = "********"
    return new_data

"""Trip create/update validation handler."""

import json
import logging
from typing import Any

from core.errors import ErrorCode, TripPlannerError, USER_MESSAGES
from core.services.trips import build_trip_record

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    """Validate a submitted trip and return it with its date in storage form."""
    try:
        payload = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError:
        return _error_response(400, ErrorCode.INVALID_REQUEST)

    if not isinstance(payload, dict):
        return _error_response(400, ErrorCode.INVALID_REQUEST)

    try:
        record = build_trip_record(payload)
    except TripPlannerError as exc:
        logger.info("Trip validation failed: %s", exc.message)
        return _error_response(400, exc.code, getattr(exc, "details", []))
    except Exception:
        logger.exception("Unexpected error validating trip")
        return _error_response(500, ErrorCode.INTERNAL_ERROR)

    return {"statusCode": 200, "body": record.model_dump_json(by_alias=True)}


def _error_response(status: int, code: ErrorCode, details: list[dict[str, str]] | None = None) -> dict[str, Any]:
    return {
        "statusCode": status,
        "body": json.dumps({"error": code.value, "message": USER_MESSAGES[code], "details": details or []}),
    }

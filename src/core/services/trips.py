"""Turn a submitted trip form into a validated, storage-ready TripRecord."""

import logging
from datetime import date
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from core.errors import USER_MESSAGES, ErrorCode, ValidationError
from core.models.trip import TripRecord
from core.services.date_format import convert_to_storage_form, get_validation_code

logger = logging.getLogger(__name__)


def _field_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    details = []
    for error in exc.errors():
        message = error["msg"]
        if error["type"] == "value_error":
            message = str(error["ctx"]["error"])
        details.append({"field": ".".join(str(part) for part in error["loc"]) or "trip", "message": message})
    return details


def build_trip_record(payload: dict[str, Any], today: date | None = None) -> TripRecord:
    """Validate a trip whose ``flightDate`` is in display form (DD-MON-YYYY).

    ``today`` pins the day used for the past-date check; it defaults to the local day.
    """
    display_date = payload.get("flightDate")
    if not display_date:
        raise ValidationError("flightDate missing", code=ErrorCode.DATE_REQUIRED)

    date_code = get_validation_code(display_date, today=today)
    if date_code is not None:
        raise ValidationError(
            f"flightDate rejected: {display_date!r}",
            code=date_code,
            details=[{"field": "flightDate", "message": USER_MESSAGES[date_code]}],
        )

    try:
        record = TripRecord.model_validate(
            {**payload, "flightDate": convert_to_storage_form(display_date)},
            context={"today": today},
        )
    except PydanticValidationError as exc:
        details = _field_errors(exc)
        logger.info("Trip rejected with %d field errors", len(details))
        raise ValidationError("Trip failed validation", details=details) from exc

    return record

"""Contextual status labels for a trip, based on its dates relative to today."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict

from core.services.date_format import to_date


class TripStatus(str, Enum):
    UPCOMING = "Upcoming"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    DEPARTING_TODAY = "Departing Today"
    RETURNING_TODAY = "Returning Today"
    NO_DATE = "No Date"


STATUS_COLORS: dict[TripStatus, str] = {
    TripStatus.UPCOMING: "success",
    TripStatus.IN_PROGRESS: "warning",
    TripStatus.COMPLETED: "default",
    TripStatus.DEPARTING_TODAY: "info",
    TripStatus.RETURNING_TODAY: "info",
    TripStatus.NO_DATE: "default",
}


class TripStatusResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: TripStatus
    color: str


def get_status_color(status: TripStatus) -> str:
    return STATUS_COLORS.get(status, "default")


def _result(status: TripStatus) -> TripStatusResult:
    return TripStatusResult(status=status, color=get_status_color(status))


def get_trip_status(
    departure: date | str | None,
    return_date: date | str | None = None,
    today: date | None = None,
) -> TripStatusResult:
    """Dates may be date objects, display-form or storage-form strings.

    Without a return date the trip is treated as a same-day trip.
    """
    departure_day = to_date(departure)
    if departure_day is None:
        return _result(TripStatus.NO_DATE)

    today = today if today is not None else date.today()
    return_day = to_date(return_date) or departure_day

    if departure_day == today:
        return _result(TripStatus.DEPARTING_TODAY)
    if return_day == today:
        return _result(TripStatus.RETURNING_TODAY)
    if today < departure_day:
        return _result(TripStatus.UPCOMING)
    if today > return_day:
        return _result(TripStatus.COMPLETED)
    return _result(TripStatus.IN_PROGRESS)

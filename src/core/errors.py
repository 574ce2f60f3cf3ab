"""
Custom exceptions and error handling for the trip planner.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda functions and client communication. The same
message table backs the date validation messages shown next to form fields.

Usage:
    from core.errors import ValidationError, ErrorCode

    raise ValidationError("flightDate missing", code=ErrorCode.DATE_REQUIRED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Date errors
    DATE_REQUIRED = "DATE_REQUIRED"
    DATE_FORMAT = "DATE_FORMAT"
    INVALID_DATE = "INVALID_DATE"
    PAST_DATE = "PAST_DATE"

    # Trip record errors
    INVALID_CITY_CODE = "INVALID_CITY_CODE"
    SAME_ORIGIN_DESTINATION = "SAME_ORIGIN_DESTINATION"
    TOO_MANY_LAYOVERS = "TOO_MANY_LAYOVERS"
    TIME_REQUIRED = "TIME_REQUIRED"
    INVALID_TIME = "INVALID_TIME"
    DETAILS_TOO_LONG = "DETAILS_TOO_LONG"

    # Airport directory errors
    AIRPORT_LOOKUP_FAILED = "AIRPORT_LOOKUP_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DATE_REQUIRED: "Flight Date is required",
    ErrorCode.DATE_FORMAT: "Please enter date in DD-MON-YYYY format (e.g., 15-JAN-2024)",
    ErrorCode.INVALID_DATE: "Invalid date. Please check day, month, and year.",
    ErrorCode.PAST_DATE: "Flight date cannot be in the past",
    ErrorCode.INVALID_CITY_CODE: "City code must be 3 characters",
    ErrorCode.SAME_ORIGIN_DESTINATION: "From City and To City must be different",
    ErrorCode.TOO_MANY_LAYOVERS: "A trip can have at most 3 layover cities",
    ErrorCode.TIME_REQUIRED: "Flight Time is required when booking is confirmed",
    ErrorCode.INVALID_TIME: "Please enter time in HH:mm format",
    ErrorCode.DETAILS_TOO_LONG: "Flight Details must be 250 characters or less",
    ErrorCode.AIRPORT_LOOKUP_FAILED: "Unable to load airport information. Please try again.",
    ErrorCode.VALIDATION_ERROR: "Your trip contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TripPlannerError(Exception):
    """Base exception for all trip planner errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ValidationError(TripPlannerError):
    """Trip input failed validation. ``details`` holds per-field messages."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: list[dict[str, str]] | None = None,
    ):
        super().__init__(message, code=code)
        self.details = details or []


class AirportLookupError(TripPlannerError):
    """Airport directory could not be read."""

    pass

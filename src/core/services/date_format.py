"""
Display-form date handling for trip dates.

Trip dates are typed and shown as DD-MON-YYYY (e.g. 15-JAN-2024) and persisted
as ISO YYYY-MM-DD. Every function here reports failure as a value (None, "" or
False) so form code can always render a message without catching exceptions.
"""

import re
from datetime import date, datetime

from core.errors import USER_MESSAGES, ErrorCode
from core.models.trip import DateCheck

MONTHS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")
MONTH_NUMBERS = {name: index + 1 for index, name in enumerate(MONTHS)}

_DISPLAY_PATTERN = re.compile(r"(?P<day>[0-9]{2})-(?P<month>[A-Z]{3})-(?P<year>[0-9]{4})")
_INPUT_STRIP = re.compile(r"[^0-9A-Za-z]")

NOT_SET = "Date not set"


def _match_fields(text: str) -> tuple[int, int, int] | None:
    """Lexical check only: returns (year, month, day) or None."""
    match = _DISPLAY_PATTERN.fullmatch(text)
    if not match:
        return None
    month = MONTH_NUMBERS.get(match["month"])
    if month is None:
        return None
    return int(match["year"]), month, int(match["day"])


def _build_date(year: int, month: int, day: int) -> date | None:
    # Years below 1000 would not render back as four digits.
    if year < 1000:
        return None
    try:
        candidate = date(year, month, day)
    except ValueError:
        return None
    # Fields must reproduce exactly; anything normalized is an impossible date.
    if (candidate.year, candidate.month, candidate.day) != (year, month, day):
        return None
    return candidate


def _resolve_today(today: date | None) -> date:
    return today if today is not None else date.today()


def format_date(value: date) -> str:
    return f"{value.day:02d}-{MONTHS[value.month - 1]}-{value.year}"


def parse_date(text: str) -> date | None:
    """Parse DD-MON-YYYY. Month tokens are uppercase only."""
    if not text or not isinstance(text, str):
        return None
    fields = _match_fields(text)
    if fields is None:
        return None
    return _build_date(*fields)


def validate_date_format(text: str) -> bool:
    """Empty input is valid (optional field); required fields check emptiness separately."""
    if not text:
        return True
    return parse_date(text) is not None


def is_valid_for_future_trip(text: str, today: date | None = None) -> bool:
    if not validate_date_format(text):
        return False
    parsed = parse_date(text)
    if parsed is None:
        return False
    return parsed >= _resolve_today(today)


def get_validation_code(text: str, today: date | None = None) -> ErrorCode | None:
    """Classify the first failing check: format, calendar, then past."""
    if not text:
        return None

    fields = _match_fields(text) if isinstance(text, str) else None
    if fields is None:
        return ErrorCode.DATE_FORMAT

    parsed = _build_date(*fields)
    if parsed is None:
        return ErrorCode.INVALID_DATE

    if parsed < _resolve_today(today):
        return ErrorCode.PAST_DATE

    return None


def get_validation_error(text: str, today: date | None = None) -> str | None:
    code = get_validation_code(text, today=today)
    return USER_MESSAGES[code] if code is not None else None


def validate_trip_date(text: str, today: date | None = None) -> DateCheck:
    error = get_validation_error(text, today=today)
    return DateCheck(is_valid=error is None, error=error)


def format_input_value(raw: str) -> str:
    """Re-insert hyphens into raw keystrokes: DD, then -MON, then -YYYY.

    Purely positional. Month names and plausibility are not checked and
    anything past nine cleaned characters is dropped.
    """
    clean = _INPUT_STRIP.sub("", raw or "").upper()

    formatted = clean[0:2]
    if len(clean) >= 3:
        formatted += "-" + clean[2:5]
    if len(clean) >= 6:
        formatted += "-" + clean[5:9]
    return formatted


def convert_to_storage_form(text: str) -> str:
    parsed = parse_date(text)
    if parsed is None:
        return ""
    return f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"


def _parse_iso(text: str) -> date | None:
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def convert_from_storage_form(text: str) -> str:
    """Render an ISO date (or datetime) in display form, or "" if it does not parse."""
    if not text or not isinstance(text, str):
        return ""
    parsed = _parse_iso(text.strip())
    if parsed is None:
        return ""
    return format_date(parsed)


def today_formatted(today: date | None = None) -> str:
    return format_date(_resolve_today(today))


def format_for_display(value: date | str | None) -> str:
    if not value:
        return ""
    if isinstance(value, date):
        return format_date(value)

    parsed = parse_date(value)
    if parsed is not None:
        return format_date(parsed)
    return convert_from_storage_form(value) or value


def format_trip_date(value: date | str | None) -> str:
    return format_for_display(value) or NOT_SET


def to_date(value: date | str | None) -> date | None:
    """Accept a date, a display-form string or a storage-form string."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    return parse_date(value) or _parse_iso(value.strip())


def is_date_in_past(text: str, today: date | None = None) -> bool:
    parsed = to_date(text)
    if parsed is None:
        return False
    return parsed < _resolve_today(today)

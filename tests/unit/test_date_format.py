"""Unit tests for DD-MON-YYYY date handling."""

from datetime import date, datetime, timedelta

import pytest

from core.errors import USER_MESSAGES, ErrorCode
from core.services.date_format import (
    MONTHS,
    convert_from_storage_form,
    convert_to_storage_form,
    format_date,
    format_for_display,
    format_input_value,
    format_trip_date,
    get_validation_code,
    get_validation_error,
    is_date_in_past,
    is_valid_for_future_trip,
    parse_date,
    today_formatted,
    validate_date_format,
    validate_trip_date,
)

TODAY = date(2024, 1, 15)


# --- format / parse ---


def test_format_date():
    assert format_date(date(2024, 1, 15)) == "15-JAN-2024"
    assert format_date(date(2023, 12, 3)) == "03-DEC-2023"


def test_format_date_accepts_datetime():
    assert format_date(datetime(2024, 7, 4, 18, 30)) == "04-JUL-2024"


def test_parse_date():
    assert parse_date("15-JAN-2024") == date(2024, 1, 15)


@pytest.mark.parametrize("value", [date(2024, 2, 29), date(2025, 12, 31), date(1999, 6, 1)])
def test_parse_format_round_trip(value):
    assert parse_date(format_date(value)) == value


def test_every_month_token_parses():
    for index, name in enumerate(MONTHS, start=1):
        assert parse_date(f"01-{name}-2024") == date(2024, index, 1)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "15-jan-2024",
        "15-Jan-2024",
        "15-XYZ-2024",
        "5-JAN-2024",
        "15-JAN-24",
        "15/JAN/2024",
        "15-JAN-2024 ",
        "2024-01-15",
        "garbage",
    ],
)
def test_parse_date_rejects_malformed(text):
    assert parse_date(text) is None


@pytest.mark.parametrize("text", ["31-FEB-2024", "30-FEB-2024", "31-APR-2024", "29-FEB-2023", "00-JAN-2024", "01-JAN-0999", "01-JAN-0001"])
def test_parse_date_rejects_impossible(text):
    assert parse_date(text) is None


def test_parse_date_accepts_leap_day():
    assert parse_date("29-FEB-2024") == date(2024, 2, 29)


def test_parse_date_non_string():
    assert parse_date(None) is None  # type: ignore[arg-type]


# --- validate_date_format ---


def test_validate_date_format_empty_is_valid():
    assert validate_date_format("") is True


def test_validate_date_format():
    assert validate_date_format("15-JAN-2024") is True
    assert validate_date_format("31-FEB-2024") is False
    assert validate_date_format("15-jan-2024") is False


# --- is_valid_for_future_trip ---


def test_is_valid_for_future_trip():
    assert is_valid_for_future_trip("15-JAN-2024", today=TODAY) is True
    assert is_valid_for_future_trip("16-JAN-2024", today=TODAY) is True
    assert is_valid_for_future_trip("14-JAN-2024", today=TODAY) is False


def test_is_valid_for_future_trip_rejects_empty_and_malformed():
    assert is_valid_for_future_trip("", today=TODAY) is False
    assert is_valid_for_future_trip("31-FEB-2030", today=TODAY) is False


def test_is_valid_for_future_trip_uses_local_today():
    assert is_valid_for_future_trip(format_date(date.today())) is True
    assert is_valid_for_future_trip(format_date(date.today() - timedelta(days=1))) is False


# --- get_validation_error ---


def test_get_validation_error_empty():
    assert get_validation_error("") is None


def test_get_validation_error_valid_future():
    assert get_validation_error("20-JAN-2024", today=TODAY) is None
    assert get_validation_error("15-JAN-2024", today=TODAY) is None


def test_get_validation_error_format_hint():
    assert get_validation_error("15-jan-2024", today=TODAY) == USER_MESSAGES[ErrorCode.DATE_FORMAT]
    assert get_validation_error("15-XYZ-2024", today=TODAY) == USER_MESSAGES[ErrorCode.DATE_FORMAT]


def test_get_validation_error_impossible_date():
    message = get_validation_error("31-FEB-2024", today=TODAY)
    assert message == USER_MESSAGES[ErrorCode.INVALID_DATE]
    assert message != USER_MESSAGES[ErrorCode.DATE_FORMAT]


def test_get_validation_error_past():
    assert get_validation_error("14-JAN-2024", today=TODAY) == "Flight date cannot be in the past"


def test_get_validation_error_checks_format_before_past():
    assert get_validation_code("01-jan-2000", today=TODAY) == ErrorCode.DATE_FORMAT
    assert get_validation_code("31-FEB-2000", today=TODAY) == ErrorCode.INVALID_DATE


def test_validate_trip_date():
    assert validate_trip_date("20-JAN-2024", today=TODAY).is_valid is True
    result = validate_trip_date("01-JAN-2024", today=TODAY)
    assert result.is_valid is False
    assert result.error == USER_MESSAGES[ErrorCode.PAST_DATE]


# --- format_input_value ---


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ""),
        ("1", "1"),
        ("15", "15"),
        ("15j", "15-J"),
        ("15ja", "15-JA"),
        ("15jan", "15-JAN"),
        ("15jan2", "15-JAN-2"),
        ("15jan2024", "15-JAN-2024"),
        ("15-jan-2024", "15-JAN-2024"),
        ("15 / jan / 2024", "15-JAN-2024"),
        ("15jan20249999", "15-JAN-2024"),
    ],
)
def test_format_input_value(raw, expected):
    assert format_input_value(raw) == expected


def test_format_input_value_does_not_validate():
    assert format_input_value("99xyz0000") == "99-XYZ-0000"


# --- storage form ---


def test_convert_to_storage_form():
    assert convert_to_storage_form("15-JAN-2024") == "2024-01-15"
    assert convert_to_storage_form("03-DEC-2023") == "2023-12-03"


def test_convert_to_storage_form_invalid():
    assert convert_to_storage_form("garbage") == ""
    assert convert_to_storage_form("31-FEB-2024") == ""
    assert convert_to_storage_form("") == ""


def test_convert_from_storage_form():
    assert convert_from_storage_form("2024-01-15") == "15-JAN-2024"
    assert convert_from_storage_form("2024-01-15T10:30:00") == "15-JAN-2024"


def test_convert_from_storage_form_invalid():
    assert convert_from_storage_form("") == ""
    assert convert_from_storage_form("not a date") == ""
    assert convert_from_storage_form("2024-02-30") == ""


def test_storage_round_trip():
    assert convert_from_storage_form(convert_to_storage_form("29-FEB-2024")) == "29-FEB-2024"


# --- today / display helpers ---


def test_today_formatted():
    assert today_formatted(today=TODAY) == "15-JAN-2024"
    assert today_formatted() == format_date(date.today())


def test_format_for_display():
    assert format_for_display(date(2024, 1, 15)) == "15-JAN-2024"
    assert format_for_display("15-JAN-2024") == "15-JAN-2024"
    assert format_for_display("2024-01-15") == "15-JAN-2024"
    assert format_for_display("someday") == "someday"
    assert format_for_display(None) == ""


def test_format_trip_date():
    assert format_trip_date("2024-01-15") == "15-JAN-2024"
    assert format_trip_date(None) == "Date not set"


def test_is_date_in_past():
    assert is_date_in_past("14-JAN-2024", today=TODAY) is True
    assert is_date_in_past("2024-01-14", today=TODAY) is True
    assert is_date_in_past("15-JAN-2024", today=TODAY) is False
    assert is_date_in_past("garbage", today=TODAY) is False
    assert is_date_in_past("", today=TODAY) is False


@pytest.mark.parametrize("text", ["01-JAN-1000", "15-JAN-2024", "29-FEB-2024", "31-DEC-9999"])
def test_accepted_display_strings_round_trip(text):
    assert format_date(parse_date(text)) == text


def test_three_digit_year_is_invalid_date():
    assert get_validation_code("01-JAN-0999", today=TODAY) == ErrorCode.INVALID_DATE
    assert convert_to_storage_form("01-JAN-0999") == ""

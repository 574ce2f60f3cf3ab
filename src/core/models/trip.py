import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel

from core.errors import USER_MESSAGES, ErrorCode

MAX_LAYOVERS = 3
MAX_DETAILS_LENGTH = 250

_TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")


class DateCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: str | None = None


def _city_code(value: str) -> str:
    code = value.strip().upper() if isinstance(value, str) else ""
    if len(code) != 3 or not code.isascii() or not code.isalpha():
        raise ValueError(USER_MESSAGES[ErrorCode.INVALID_CITY_CODE])
    return code


class TripRecord(BaseModel):
    """Trip accepted by the create/update API. ``flight_date`` is in storage form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    from_city: str
    to_city: str
    layover_cities: list[str] = Field(default_factory=list, alias="layoverCity")
    flight_date: date
    flight_time: str | None = None
    confirmed: bool = False
    flight_details: str = ""
    languages: list[str] = Field(default_factory=list)

    @field_validator("from_city", "to_city", mode="before")
    @classmethod
    def city_code(cls, value: str) -> str:
        return _city_code(value)

    @field_validator("layover_cities", mode="before")
    @classmethod
    def layover_codes(cls, value: list[str] | None) -> list[str]:
        if isinstance(value, str):
            value = [value]
        if value is not None and not isinstance(value, (list, tuple)):
            raise ValueError(USER_MESSAGES[ErrorCode.INVALID_CITY_CODE])
        codes = [_city_code(code) for code in (value or []) if code]
        if len(codes) > MAX_LAYOVERS:
            raise ValueError(USER_MESSAGES[ErrorCode.TOO_MANY_LAYOVERS])
        return codes

    @field_validator("flight_time", mode="before")
    @classmethod
    def clock_time(cls, value: str | None) -> str | None:
        if not value:
            return None
        if not isinstance(value, str) or not _TIME_PATTERN.fullmatch(value):
            raise ValueError(USER_MESSAGES[ErrorCode.INVALID_TIME])
        return value

    @field_validator("flight_details", mode="before")
    @classmethod
    def details_length(cls, value: str | None) -> str:
        value = value or ""
        if isinstance(value, str) and len(value) > MAX_DETAILS_LENGTH:
            raise ValueError(USER_MESSAGES[ErrorCode.DETAILS_TOO_LONG])
        return value

    @field_validator("languages", mode="before")
    @classmethod
    def language_names(cls, value: list[str] | None) -> list[str]:
        if value is not None and not isinstance(value, (list, tuple)):
            return value
        names = [name.strip() if isinstance(name, str) else name for name in (value or [])]
        return [name for name in names if name != ""]

    @field_validator("flight_date")
    @classmethod
    def not_in_past(cls, value: date, info: ValidationInfo) -> date:
        today = (info.context or {}).get("today") or date.today()
        if value < today:
            raise ValueError(USER_MESSAGES[ErrorCode.PAST_DATE])
        return value

    @model_validator(mode="after")
    def trip_rules(self) -> "TripRecord":
        if self.from_city == self.to_city:
            raise ValueError(USER_MESSAGES[ErrorCode.SAME_ORIGIN_DESTINATION])
        if self.confirmed and not self.flight_time:
            raise ValueError(USER_MESSAGES[ErrorCode.TIME_REQUIRED])
        return self

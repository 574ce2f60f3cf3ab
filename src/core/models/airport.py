"""Pydantic models for airports and searchable dropdown options."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchableOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    identifier: str
    haystack: str | None = None

    @property
    def search_text(self) -> str:
        return self.haystack if self.haystack is not None else self.label


class Airport(BaseModel):
    model_config = ConfigDict(frozen=True)

    iata: str = Field(..., pattern="^[A-Z]{3}$")
    city: str = ""
    country: str = ""
    icao: str | None = None
    airport_name: str | None = None

    @field_validator("iata", mode="before")
    @classmethod
    def upper_code(cls, value: str) -> str:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("city", "country", mode="before")
    @classmethod
    def strip_text(cls, value: str | None) -> str:
        return (value or "").strip()

    def to_option(self) -> SearchableOption:
        label = f"{self.city} ({self.iata})" if self.city else self.iata
        return SearchableOption(
            label=label,
            identifier=self.iata,
            haystack=f"{self.city} {self.iata} {self.country}",
        )


class LocationDisplay(BaseModel):
    model_config = ConfigDict(frozen=True)

    airport_code: str = ""
    city_name: str = ""
    country_name: str = ""
    display_text: str = ""
    short_display_text: str = ""
    full_display_text: str = ""
    clean_display_text: str = ""

    @property
    def has_location_data(self) -> bool:
        return bool(self.city_name and self.country_name)

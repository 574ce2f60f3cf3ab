"""Airport directory: location display strings and loading from DynamoDB."""

import logging
from typing import Any, Iterable, Sequence

from pydantic import ValidationError as PydanticValidationError

from core.errors import AirportLookupError, ErrorCode
from core.models.airport import Airport, LocationDisplay

logger = logging.getLogger(__name__)

LAYOVER_SEPARATOR = " • "
LAYOVER_STYLES = ("short", "full", "display")


def _index(airports: Iterable[Airport]) -> dict[str, Airport]:
    return {airport.iata: airport for airport in airports}


def _describe(code: str, airport: Airport | None) -> LocationDisplay:
    city = airport.city if airport else ""
    country = airport.country if airport else ""
    if not (city and country):
        return LocationDisplay(
            airport_code=code,
            city_name=city,
            country_name=country,
            display_text=code,
            short_display_text=code,
            full_display_text=code,
            clean_display_text=code,
        )

    return LocationDisplay(
        airport_code=code,
        city_name=city,
        country_name=country,
        display_text=f"{code} ({city}, {country})",
        short_display_text=f"{city}, {country}",
        full_display_text=f"{city}, {country} ({code})",
        clean_display_text=f"{code} ({city})",
    )


def get_location_info(code: str, airports: Sequence[Airport]) -> LocationDisplay:
    if not code or not isinstance(code, str) or not code.strip():
        return LocationDisplay()

    clean_code = code.strip().upper()
    airport = _index(airports or []).get(clean_code)
    if airport is None:
        logger.debug("Airport %s not found in %d airports", clean_code, len(airports or []))
    return _describe(clean_code, airport)


def get_multiple_location_info(codes: Iterable[str | None], airports: Sequence[Airport]) -> dict[str, LocationDisplay]:
    lookup = _index(airports or [])
    result: dict[str, LocationDisplay] = {}
    for code in codes:
        if not code:
            continue
        clean_code = code.strip().upper()
        result[clean_code] = _describe(clean_code, lookup.get(clean_code))
    return result


def format_layover_cities(
    codes: Sequence[str | None] | None,
    airports: Sequence[Airport],
    style: str = "display",
) -> str:
    """Join layover cities for trip cards, e.g. "DXB (Dubai, UAE) • DOH (Doha, Qatar)"."""
    if style not in LAYOVER_STYLES:
        raise ValueError(f"Unknown layover style: {style}")

    cities = [code for code in (codes or []) if code]
    if not cities:
        return ""

    infos = get_multiple_location_info(cities, airports)
    parts = []
    for city in cities:
        info = infos[city.strip().upper()]
        if style == "short":
            parts.append(info.short_display_text or city)
        elif style == "full":
            parts.append(info.full_display_text or city)
        else:
            parts.append(info.display_text or city)
    return LAYOVER_SEPARATOR.join(parts)


def _airport_from_item(item: dict[str, Any]) -> Airport | None:
    def text(key: str) -> str | None:
        attribute = item.get(key)
        return attribute.get("S") if attribute else None

    iata = text("IATA")
    if not iata:
        return None
    return Airport(
        iata=iata,
        city=text("city"),
        country=text("country"),
        icao=text("ICAO"),
        airport_name=text("airportName"),
    )


def load_airports(dynamo_client: Any, airports_table: str) -> list[Airport]:
    """Scan the whole airports table, following pagination."""
    airports: list[Airport] = []
    skipped = 0
    last_key = None

    try:
        while True:
            scan_kwargs: dict[str, Any] = {"TableName": airports_table}
            if last_key:
                scan_kwargs["ExclusiveStartKey"] = last_key

            response = dynamo_client.scan(**scan_kwargs)

            for item in response.get("Items", []):
                try:
                    airport = _airport_from_item(item)
                except PydanticValidationError:
                    logger.warning("Skipping malformed airport item %s", item.get("IATA"))
                    airport = None
                if airport is None:
                    skipped += 1
                    continue
                airports.append(airport)

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
    except Exception as exc:
        raise AirportLookupError(
            f"Failed to scan {airports_table}: {exc}", code=ErrorCode.AIRPORT_LOOKUP_FAILED
        ) from exc

    logger.info("Loaded %d airports from %s (%d skipped)", len(airports), airports_table, skipped)
    return airports

"""City dropdown search handler."""

import json
import logging
from typing import Any

from core.clients import get_dynamo_client
from core.config import get_config
from core.errors import AirportLookupError, ErrorCode, USER_MESSAGES
from core.services.airports import load_airports
from core.services.city_search import highlight_span, search_options

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    query_params = event.get("queryStringParameters") or {}
    query = query_params.get("q") or ""

    try:
        limit = int(query_params["limit"]) if query_params.get("limit") else None
    except ValueError:
        return _error_response(400, ErrorCode.INVALID_REQUEST)

    config = get_config()
    try:
        airports = load_airports(get_dynamo_client(), config.airports_table)
    except AirportLookupError:
        logger.exception("Airport lookup failed for query %r", query)
        return _error_response(500, ErrorCode.AIRPORT_LOOKUP_FAILED)

    options = search_options(
        [airport.to_option() for airport in airports],
        query,
        browse_limit=limit if limit is not None else config.browse_limit,
        search_limit=limit if limit is not None else config.search_limit,
    )

    results = []
    for option in options:
        span = highlight_span(option.label, query)
        results.append(
            {
                "label": option.label,
                "identifier": option.identifier,
                "highlight": list(span) if span else None,
            }
        )

    return {"statusCode": 200, "body": json.dumps(results)}


def _error_response(status: int, code: ErrorCode) -> dict[str, Any]:
    return {"statusCode": status, "body": json.dumps({"error": code.value, "message": USER_MESSAGES[code]})}

"""
Pydantic models for the trip planner.
"""

from core.models.airport import Airport, LocationDisplay, SearchableOption
from core.models.trip import DateCheck, TripRecord

__all__ = ["Airport", "DateCheck", "LocationDisplay", "SearchableOption", "TripRecord"]

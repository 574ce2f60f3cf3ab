"""
Business services for the trip planner.

- date_format.py: DD-MON-YYYY parsing, validation, input masking and storage conversion
- city_search.py: normalized substring matching and highlight spans for city dropdowns
- airports.py: airport location display strings and directory loading
- trip_status.py: contextual trip status labels
"""

__all__: list[str] = []

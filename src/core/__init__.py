"""
Core business logic package for the trip planner.

Date handling, city search, airport lookups and trip validation live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []

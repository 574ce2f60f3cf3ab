"""Shared test fixtures for the trip planner."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def airports():
    """A small airport directory covering the dropdown search cases."""
    from core.models import Airport

    return [
        Airport(iata="CDG", city="Paris", country="France"),
        Airport(iata="LHR", city="London", country="United Kingdom"),
        Airport(iata="BER", city="Berlin", country="Germany"),
        Airport(iata="JFK", city="New York", country="USA"),
        Airport(iata="EWR", city="Newark", country="USA"),
        Airport(iata="SEA", city="Seattle", country="USA"),
    ]


@pytest.fixture
def airport_items():
    """Raw DynamoDB scan items for the airports table."""
    return [
        {"IATA": {"S": "cdg"}, "city": {"S": " Paris "}, "country": {"S": "France"}, "ICAO": {"S": "LFPG"}},
        {"IATA": {"S": "SEA"}, "city": {"S": "Seattle"}, "country": {"S": "USA"}},
        {"city": {"S": "Nowhere"}},
    ]

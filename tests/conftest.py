"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src is on path when running tests without installed package
src = Path(__file__).resolve().parent.parent / "src"
if src.exists() and str(src) not in sys.path:
    sys.path.insert(0, str(src))

from flightlog.chronicle.models import Airport, Flight  # noqa: E402


@pytest.fixture
def airports() -> list[Airport]:
    return [
        Airport(code="PEK", name="Beijing Capital", latitude=40.0799, longitude=116.6031),
        Airport(code="PVG", name="Shanghai Pudong", latitude=31.1443, longitude=121.8083),
        Airport(code="LAX", name="Los Angeles", latitude=33.9416, longitude=-118.4085),
        Airport(code="NRT", name="Narita", latitude=35.7720, longitude=140.3929),
        Airport(code="EAST", name="East", latitude=0, longitude=170),
        Airport(code="WEST", name="West", latitude=0, longitude=-170),
    ]


@pytest.fixture
def flights() -> list[Flight]:
    return [
        Flight("CA1234", "PEK", "PVG", "2023-01-01T10:00:00Z", "2023-01-01T12:00:00Z"),
        Flight("CA1235", "PVG", "PEK", "2023-01-02T10:00:00Z", "2023-01-02T12:00:00Z"),
        Flight("JL0062", "NRT", "LAX", "2023-01-03T17:00:00Z", "2023-01-03T11:00:00Z"),
    ]

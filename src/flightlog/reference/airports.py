"""Bundled airport and flight log data."""

from importlib import resources
from typing import Optional

import json

from flightlog.chronicle.models import Airport, Flight

_airports_cache: Optional[list[dict]] = None
_flights_cache: Optional[list[dict]] = None


def _load_json(name: str) -> list[dict]:
    data_path = resources.files("flightlog.reference.data").joinpath(name)
    with data_path.open(encoding="utf-8") as f:
        rows = json.load(f)
    if not isinstance(rows, list):
        raise ValueError(f"{name}: expected a JSON array, got {type(rows).__name__}")
    return rows


def _load_airports() -> list[dict]:
    global _airports_cache
    if _airports_cache is None:
        _airports_cache = _load_json("airports.json")
    return _airports_cache


def _load_flights() -> list[dict]:
    global _flights_cache
    if _flights_cache is None:
        _flights_cache = _load_json("flights.json")
    return _flights_cache


def bundled_airports() -> list[Airport]:
    """Airports shipped with the package."""
    return [Airport.from_dict(row) for row in _load_airports()]


def bundled_flights() -> list[Flight]:
    """Flight log shipped with the package."""
    return [Flight.from_dict(row) for row in _load_flights()]


def get_airport(code: str) -> Optional[Airport]:
    """Look up a bundled airport by code. Returns None if not found."""
    if not code:
        return None
    code = code.upper().strip()
    for row in _load_airports():
        if row.get("code") == code:
            return Airport.from_dict(row)
    return None

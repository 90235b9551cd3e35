"""Reference data: bundled airports, the flight log and airline names."""

from flightlog.reference.airlines import AIRLINE_NAMES, get_airline_name
from flightlog.reference.airports import bundled_airports, bundled_flights, get_airport

__all__ = [
    "AIRLINE_NAMES",
    "bundled_airports",
    "bundled_flights",
    "get_airline_name",
    "get_airport",
]

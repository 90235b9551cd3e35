"""Pluggable airport and flight data providers."""

from flightlog.chronicle.sources.base import AirportProvider, FlightProvider, find_unresolved_codes
from flightlog.chronicle.sources.remote import HttpAirportSource, HttpFlightSource
from flightlog.chronicle.sources.static import StaticAirportSource, StaticFlightSource

__all__ = [
    "AirportProvider",
    "FlightProvider",
    "HttpAirportSource",
    "HttpFlightSource",
    "StaticAirportSource",
    "StaticFlightSource",
    "find_unresolved_codes",
]

"""Flight log route geometry, statistics and filtering."""

from flightlog.chronicle.geo import correct_dateline, distance_km, normalize_longitude
from flightlog.chronicle.models import (
    Airport,
    Coordinate,
    Flight,
    FlightFilter,
    FlightLogView,
    ProcessedFlight,
)
from flightlog.chronicle.processor import calculate_airport_activity, process_flights
from flightlog.chronicle.service import FlightLogService
from flightlog.chronicle.stats import (
    FlightStatistics,
    calculate_flight_statistics,
    get_available_airlines,
    get_available_years,
)
from flightlog.chronicle.timeline import Timeline, filter_flights, related_flights

__all__ = [
    "Airport",
    "Coordinate",
    "Flight",
    "FlightFilter",
    "FlightLogService",
    "FlightLogView",
    "FlightStatistics",
    "ProcessedFlight",
    "Timeline",
    "calculate_airport_activity",
    "calculate_flight_statistics",
    "correct_dateline",
    "distance_km",
    "filter_flights",
    "get_available_airlines",
    "get_available_years",
    "normalize_longitude",
    "process_flights",
    "related_flights",
]

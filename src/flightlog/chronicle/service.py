"""Flight log service - data loading, validation, filtering and memoized views."""

import logging
from typing import Dict, List, Optional

from flightlog.chronicle.models import Airport, Flight, FlightFilter, FlightLogView
from flightlog.chronicle.processor import calculate_airport_activity, process_flights
from flightlog.chronicle.sources.base import AirportProvider, FlightProvider, find_unresolved_codes
from flightlog.chronicle.sources.static import StaticAirportSource, StaticFlightSource
from flightlog.chronicle.stats import (
    calculate_flight_statistics,
    get_available_airlines,
    get_available_years,
)
from flightlog.chronicle.timeline import Timeline, filter_flights, related_flights
from flightlog.config import Settings

log = logging.getLogger(__name__)


class FlightLogService:
    """Orchestrates providers, filter state and derived views."""

    def __init__(
        self,
        airport_source: Optional[AirportProvider] = None,
        flight_source: Optional[FlightProvider] = None,
    ):
        self._airport_source = airport_source or StaticAirportSource()
        self._flight_source = flight_source or StaticFlightSource()
        self._airports: Optional[List[Airport]] = None
        self._flights: Optional[List[Flight]] = None
        self._views: Dict[FlightFilter, FlightLogView] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "FlightLogService":
        """HTTP providers for configured URLs, bundled data otherwise."""
        from flightlog.chronicle.sources.remote import HttpAirportSource, HttpFlightSource

        airport_source = (
            HttpAirportSource(settings.airports_url, timeout=settings.http_timeout)
            if settings.airports_url
            else None
        )
        flight_source = (
            HttpFlightSource(settings.flights_url, timeout=settings.http_timeout)
            if settings.flights_url
            else None
        )
        return cls(airport_source=airport_source, flight_source=flight_source)

    def _load(self) -> None:
        if self._airports is not None and self._flights is not None:
            return
        airports = self._airport_source.list()
        flights = self._flight_source.list()
        log.info("Loaded %d airports and %d flights", len(airports), len(flights))

        for code, count in sorted(find_unresolved_codes(flights, airports).items()):
            log.warning(
                "Airport %s referenced by %d flight(s) is unknown; those flights are not drawn",
                code,
                count,
            )
        self._airports = airports
        self._flights = flights

    def reload(self) -> None:
        """Drop loaded data and cached views; the next access reloads."""
        self._airports = None
        self._flights = None
        self._views.clear()

    def airports(self) -> List[Airport]:
        self._load()
        return list(self._airports)

    def flights(self) -> List[Flight]:
        self._load()
        return list(self._flights)

    def years(self) -> List[str]:
        """Year filter options."""
        return get_available_years(self.flights())

    def airlines(self) -> List[str]:
        """Airline filter options."""
        return get_available_airlines(self.flights())

    def timeline(self, flight_filter: Optional[FlightFilter] = None) -> Optional[Timeline]:
        """Timeline over the flights selected by year/airline (ignoring the cut-off)."""
        base = FlightFilter() if flight_filter is None else FlightFilter(
            year=flight_filter.year, airline=flight_filter.airline
        )
        return Timeline.from_flights(self.view(base).flights)

    def view(self, flight_filter: Optional[FlightFilter] = None) -> FlightLogView:
        """Derived view for a filter state, memoized until reload()."""
        flight_filter = flight_filter or FlightFilter()
        cached = self._views.get(flight_filter)
        if cached is not None:
            return cached

        airports = self.airports()
        flights = filter_flights(self.flights(), flight_filter)
        view = FlightLogView(
            flights=flights,
            processed=process_flights(flights, airports),
            statistics=calculate_flight_statistics(flights, airports),
            activity=calculate_airport_activity(flights),
            flight_filter=flight_filter,
        )
        log.debug("Computed view for %s: %d flights", flight_filter, len(flights))
        self._views[flight_filter] = view
        return view

    def related_flights(self, code: str, flight_filter: Optional[FlightFilter] = None) -> List[Flight]:
        """Flights touching an airport under the current filter, newest first."""
        return related_flights(self.view(flight_filter).flights, code)

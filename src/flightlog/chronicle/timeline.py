"""Filter state application and timeline scrubbing."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from flightlog.chronicle.models import Flight, FlightFilter


def matches_filter(flight: Flight, flight_filter: FlightFilter) -> bool:
    """Check if a flight matches year, airline and timeline cut-off."""
    if flight_filter.year is not None and flight.year() != flight_filter.year:
        return False
    if flight_filter.airline is not None and flight.airline_code() != flight_filter.airline:
        return False
    if flight_filter.until is not None and flight.departure_datetime() > flight_filter.until:
        return False
    return True


def filter_flights(flights: Iterable[Flight], flight_filter: FlightFilter) -> List[Flight]:
    """Flights matching the filter, in input order."""
    if flight_filter.is_empty():
        return list(flights)
    return [f for f in flights if matches_filter(f, flight_filter)]


def related_flights(flights: Iterable[Flight], code: str) -> List[Flight]:
    """Flights touching an airport, newest departure first."""
    related = [f for f in flights if code in (f.departure_airport, f.arrival_airport)]
    return sorted(related, key=lambda f: f.departure_datetime(), reverse=True)


@dataclass(frozen=True)
class Timeline:
    """Maps between a moment in the log and a 0-100 slider position."""

    start: datetime
    end: datetime

    @classmethod
    def from_flights(cls, flights: Iterable[Flight]) -> Optional["Timeline"]:
        """Span from earliest to latest departure. None for no flights."""
        moments = [f.departure_datetime() for f in flights]
        if not moments:
            return None
        return cls(start=min(moments), end=max(moments))

    @property
    def duration_seconds(self) -> float:
        return (self.end - self.start).total_seconds()

    def progress(self, moment: Optional[datetime]) -> float:
        """Slider position for a moment, clamped to [0, 100]. None shows everything."""
        if moment is None or self.duration_seconds <= 0:
            return 100.0
        pct = (moment - self.start).total_seconds() / self.duration_seconds * 100
        return min(100.0, max(0.0, pct))

    def moment_at(self, progress: float) -> datetime:
        """Moment at a slider position (clamped to [0, 100])."""
        progress = min(100.0, max(0.0, progress))
        return self.start + (self.end - self.start) * (progress / 100)

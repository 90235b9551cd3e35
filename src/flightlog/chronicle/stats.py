"""Statistics computation for the flight log."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from flightlog.chronicle.geo import airport_distance_km
from flightlog.chronicle.models import Airport, Flight
from flightlog.chronicle.processor import build_airport_index
from flightlog.reference.airlines import get_airline_name

TOP_DESTINATIONS = 5


@dataclass(frozen=True)
class Destination:
    code: str
    name: str
    count: int


@dataclass(frozen=True)
class AirlineCount:
    code: str
    name: str
    count: int


@dataclass(frozen=True)
class RouteDistance:
    """A route with its great-circle distance in whole kilometres."""

    origin: str
    destination: str
    distance: int

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.origin, "to": self.destination, "distance": self.distance}


@dataclass
class FlightStatistics:
    """Container for flight log statistics."""

    total_flights: int = 0
    total_distance: int = 0
    top_destinations: List[Destination] = field(default_factory=list)
    top_airline: Optional[AirlineCount] = None
    longest_flight: Optional[RouteDistance] = None
    shortest_flight: Optional[RouteDistance] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (camelCase keys, absent records as None)."""
        return {
            "totalFlights": self.total_flights,
            "totalDistance": self.total_distance,
            "topDestinations": [
                {"code": d.code, "name": d.name, "count": d.count}
                for d in self.top_destinations
            ],
            "topAirline": (
                {
                    "code": self.top_airline.code,
                    "name": self.top_airline.name,
                    "count": self.top_airline.count,
                }
                if self.top_airline
                else None
            ),
            "longestFlight": self.longest_flight.to_dict() if self.longest_flight else None,
            "shortestFlight": self.shortest_flight.to_dict() if self.shortest_flight else None,
        }

    def destinations_dataframe(self) -> pd.DataFrame:
        """Return top_destinations as DataFrame."""
        if not self.top_destinations:
            return pd.DataFrame(columns=["code", "name", "count"])
        return pd.DataFrame(
            [{"code": d.code, "name": d.name, "count": d.count} for d in self.top_destinations]
        )


def calculate_flight_statistics(
    flights: Iterable[Flight], airports: Iterable[Airport]
) -> FlightStatistics:
    """Compute statistics over a (possibly filtered) flight list."""
    flights = list(flights)
    stats = FlightStatistics()

    if not flights:
        return stats

    index = build_airport_index(airports)
    stats.total_flights = len(flights)

    total_distance = 0.0
    destinations: Counter[str] = Counter()
    airlines: Counter[str] = Counter()
    longest = shortest = None

    for f in flights:
        destinations[f.arrival_airport] += 1
        if f.airline_code():
            airlines[f.airline_code()] += 1

        departure = index.get(f.departure_airport)
        arrival = index.get(f.arrival_airport)
        if departure is None or arrival is None:
            continue

        d = airport_distance_km(departure, arrival)
        total_distance += d
        if longest is None or d > longest[0]:
            longest = (d, f)
        if shortest is None or d < shortest[0]:
            shortest = (d, f)

    stats.total_distance = round(total_distance)

    # most_common keeps first-seen order among equal counts
    for code, count in destinations.most_common(TOP_DESTINATIONS):
        airport = index.get(code)
        stats.top_destinations.append(
            Destination(code=code, name=airport.name if airport else code, count=count)
        )

    if airlines:
        airline_code, airline_count = airlines.most_common(1)[0]
        stats.top_airline = AirlineCount(
            code=airline_code,
            name=get_airline_name(airline_code) or airline_code,
            count=airline_count,
        )

    if longest is not None:
        stats.longest_flight = _route_distance(*longest)
    if shortest is not None:
        stats.shortest_flight = _route_distance(*shortest)

    return stats


def _route_distance(distance: float, flight: Flight) -> RouteDistance:
    return RouteDistance(
        origin=flight.departure_airport,
        destination=flight.arrival_airport,
        distance=round(distance),
    )


def get_available_years(flights: Iterable[Flight]) -> List[str]:
    """Distinct departure years, newest first. Malformed times raise ValueError."""
    return sorted({f.year() for f in flights}, reverse=True)


def get_available_airlines(flights: Iterable[Flight]) -> List[str]:
    """Distinct airline prefixes, sorted."""
    return sorted({f.airline_code() for f in flights if f.airline_code()})

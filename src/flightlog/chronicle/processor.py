"""Route grouping, direction/curvature assignment and airport activity."""

from typing import Dict, Iterable, List

from flightlog.chronicle.geo import airport_distance_km, correct_dateline, normalized
from flightlog.chronicle.models import Airport, Coordinate, Direction, Flight, ProcessedFlight

BASE_CURVATURE = 0.15
OUTGOING_COLOR = "#f87171"
RETURNING_COLOR = "#60a5fa"

DIRECTION_COLORS: Dict[str, str] = {
    "outgoing": OUTGOING_COLOR,
    "returning": RETURNING_COLOR,
}


def build_airport_index(airports: Iterable[Airport]) -> Dict[str, Airport]:
    """Index airports by code. Later duplicates win."""
    return {a.code: a for a in airports}


def calculate_airport_activity(flights: Iterable[Flight]) -> Dict[str, int]:
    """Count departures plus arrivals per airport code."""
    activity: Dict[str, int] = {}
    for f in flights:
        activity[f.departure_airport] = activity.get(f.departure_airport, 0) + 1
        activity[f.arrival_airport] = activity.get(f.arrival_airport, 0) + 1
    return activity


def get_direction(departure: Coordinate, arrival: Coordinate) -> Direction:
    """Northbound legs are outgoing; on equal latitude, eastbound legs are."""
    if arrival.latitude > departure.latitude:
        return "outgoing"
    if arrival.latitude < departure.latitude:
        return "returning"
    if arrival.longitude > departure.longitude:
        return "outgoing"
    return "returning"


def group_by_route(flights: Iterable[Flight]) -> Dict[str, List[Flight]]:
    """Group flights by ordered DEP-ARR key, keeping first-seen order."""
    groups: Dict[str, List[Flight]] = {}
    for f in flights:
        groups.setdefault(f.route(), []).append(f)
    return groups


def process_flights(flights: Iterable[Flight], airports: Iterable[Airport]) -> List[ProcessedFlight]:
    """
    Annotate flights with direction, color, curvature, distance and the
    date-line corrected arrival. Flights whose airports cannot be resolved
    are dropped.
    """
    index = build_airport_index(airports)
    processed: List[ProcessedFlight] = []

    for group in group_by_route(flights).values():
        departure_raw = index.get(group[0].departure_airport)
        arrival_raw = index.get(group[0].arrival_airport)
        if departure_raw is None or arrival_raw is None:
            continue

        departure = normalized(departure_raw)
        arrival = normalized(arrival_raw)
        direction = get_direction(departure, arrival)
        color = DIRECTION_COLORS[direction]
        distance = airport_distance_km(departure_raw, arrival_raw)
        arrival_modified = correct_dateline(departure, arrival)

        for position, flight in enumerate(group):
            processed.append(
                ProcessedFlight.from_flight(
                    flight,
                    direction=direction,
                    color=color,
                    curvature=(position + 1) * BASE_CURVATURE,
                    distance=distance,
                    arrival_airport_modified=arrival_modified,
                )
            )

    return processed

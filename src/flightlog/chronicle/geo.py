"""Route geometry: great-circle distance, longitude normalization and arc curves."""

import math
from typing import Optional

import numpy as np

from flightlog.chronicle.models import Airport, Coordinate

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two points, in kilometres."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def airport_distance_km(departure: Airport, arrival: Airport) -> float:
    return distance_km(
        departure.latitude, departure.longitude, arrival.latitude, arrival.longitude
    )


def normalize_longitude(longitude: float) -> float:
    """Map a [-180, 180] longitude into the continuous [0, 360) range."""
    return longitude + 360 if longitude < 0 else longitude


def normalized(airport: Airport) -> Coordinate:
    """Airport position in the [0, 360) longitude space."""
    return Coordinate(latitude=airport.latitude, longitude=normalize_longitude(airport.longitude))


def correct_dateline(departure: Coordinate, arrival: Coordinate) -> Optional[Coordinate]:
    """
    Return an unwrapped arrival coordinate when the straight interpolation
    between the two (normalized) points would cross the map edge, else None.
    """
    delta = arrival.longitude - departure.longitude
    if abs(delta) <= 180:
        return None
    longitude = arrival.longitude - 360 if delta > 0 else arrival.longitude + 360
    return Coordinate(latitude=arrival.latitude, longitude=longitude)


def control_point(start: Coordinate, end: Coordinate, curvature: float) -> Coordinate:
    """Quadratic Bezier control point offset from the chord midpoint.

    The offset is curvature * (-dy, dx) in (lon, lat) space, so swapping the
    endpoints flips the side the arc bulges to.
    """
    dx = end.longitude - start.longitude
    dy = end.latitude - start.latitude
    return Coordinate(
        latitude=(start.latitude + end.latitude) / 2 + curvature * dx,
        longitude=(start.longitude + end.longitude) / 2 - curvature * dy,
    )


def curve_points(
    start: Coordinate, end: Coordinate, curvature: float, samples: int = 32
) -> tuple[np.ndarray, np.ndarray]:
    """Sample the arc as (latitudes, longitudes) arrays, endpoints included."""
    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")
    ctrl = control_point(start, end, curvature)
    t = np.linspace(0.0, 1.0, samples)
    a, b, c = (1 - t) ** 2, 2 * (1 - t) * t, t**2
    lats = a * start.latitude + b * ctrl.latitude + c * end.latitude
    lons = a * start.longitude + b * ctrl.longitude + c * end.longitude
    return lats, lons


def side_of_chord(start: Coordinate, end: Coordinate, point: Coordinate) -> float:
    """Signed cross product: > 0 left of start->end, < 0 right, 0 on the chord."""
    return (end.longitude - start.longitude) * (point.latitude - start.latitude) - (
        end.latitude - start.latitude
    ) * (point.longitude - start.longitude)

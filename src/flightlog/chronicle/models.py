"""Data models for the flight log."""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, List, Literal, Optional

Direction = Literal["outgoing", "returning"]


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp. Aware values are converted to naive UTC.

    Raises ValueError for malformed input.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid timestamp: {value!r}") from None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


@dataclass(frozen=True)
class Airport:
    """Airport reference record."""

    code: str
    name: str
    latitude: float
    longitude: float

    @classmethod
    def from_dict(cls, row: dict) -> "Airport":
        try:
            return cls(
                code=str(row["code"]).strip(),
                name=str(row.get("name") or row["code"]),
                latitude=float(row["latitude"]),
                longitude=float(row["longitude"]),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid airport record {row!r}: {e}") from None

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class Coordinate:
    """Projection-adjusted point used for rendering only."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Flight:
    """A single flown leg."""

    flight_number: str
    departure_airport: str
    arrival_airport: str
    departure_time: str
    arrival_time: Optional[str] = None

    @classmethod
    def from_dict(cls, row: dict) -> "Flight":
        """Build from the JSON wire shape (camelCase keys)."""
        try:
            return cls(
                flight_number=str(row["flightNumber"]).strip(),
                departure_airport=str(row["departureAirport"]).strip(),
                arrival_airport=str(row["arrivalAirport"]).strip(),
                departure_time=str(row.get("departureTime") or ""),
                arrival_time=row.get("arrivalTime") or None,
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid flight record {row!r}: {e}") from None

    def to_dict(self) -> dict[str, Any]:
        d = {
            "flightNumber": self.flight_number,
            "departureAirport": self.departure_airport,
            "arrivalAirport": self.arrival_airport,
            "departureTime": self.departure_time,
        }
        if self.arrival_time:
            d["arrivalTime"] = self.arrival_time
        return d

    def route(self) -> str:
        """Return route as DEPARTURE-ARRIVAL."""
        return f"{self.departure_airport}-{self.arrival_airport}"

    def airline_code(self) -> str:
        """Airline prefix of the flight number (e.g. 'CA' for CA1510)."""
        return self.flight_number[:2]

    def departure_datetime(self) -> datetime:
        return parse_timestamp(self.departure_time)

    def year(self) -> str:
        """Departure year as a string. Raises ValueError on a malformed time."""
        return str(self.departure_datetime().year)


@dataclass(frozen=True, kw_only=True)
class ProcessedFlight(Flight):
    """Flight annotated with rendering attributes."""

    direction: Direction
    color: str
    curvature: float
    distance: float
    # Set only when the route would otherwise wrap around the map edge
    arrival_airport_modified: Optional[Coordinate] = None

    @classmethod
    def from_flight(cls, flight: Flight, **extra: Any) -> "ProcessedFlight":
        base = {f.name: getattr(flight, f.name) for f in fields(Flight)}
        return cls(**base, **extra)

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d.update(
            {
                "direction": self.direction,
                "color": self.color,
                "curvature": self.curvature,
                "distance": self.distance,
            }
        )
        if self.arrival_airport_modified is not None:
            d["arrivalAirportModified"] = {
                "latitude": self.arrival_airport_modified.latitude,
                "longitude": self.arrival_airport_modified.longitude,
            }
        return d


@dataclass(frozen=True)
class FlightFilter:
    """Filter state: year, airline prefix and timeline cut-off. None means all."""

    year: Optional[str] = None
    airline: Optional[str] = None
    until: Optional[datetime] = None

    @classmethod
    def from_strings(
        cls,
        year: Optional[str] = None,
        airline: Optional[str] = None,
        until: Optional[str] = None,
    ) -> "FlightFilter":
        """
        Parse user-facing filter values. 'all' or empty means no filter.
        """

        def _clean(v: Optional[str]) -> Optional[str]:
            if v is None:
                return None
            v = v.strip()
            return None if not v or v.lower() == "all" else v

        year = _clean(year)
        if year is not None and not (len(year) == 4 and year.isdigit()):
            raise ValueError(f"Invalid year: {year}. Expected YYYY (e.g. 2024)")
        airline = _clean(airline)
        if airline is not None:
            airline = airline.upper()
            if len(airline) != 2:
                raise ValueError(f"Invalid airline code: {airline}. Expected 2 characters (e.g. CA)")
        until_str = _clean(until)
        return cls(
            year=year,
            airline=airline,
            until=parse_timestamp(until_str) if until_str else None,
        )

    def is_empty(self) -> bool:
        return self.year is None and self.airline is None and self.until is None


@dataclass
class FlightLogView:
    """Derived view of the log for one filter state."""

    flights: List[Flight] = field(default_factory=list)
    processed: List[ProcessedFlight] = field(default_factory=list)
    statistics: Any = None
    activity: dict[str, int] = field(default_factory=dict)
    flight_filter: FlightFilter = field(default_factory=FlightFilter)

    def to_dataframe(self):
        """Convert processed flights to a pandas DataFrame."""
        import pandas as pd

        columns = [
            "flight_number",
            "departure_airport",
            "arrival_airport",
            "departure_time",
            "direction",
            "distance_km",
            "curvature",
        ]
        if not self.processed:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(
            [
                {
                    "flight_number": f.flight_number,
                    "departure_airport": f.departure_airport,
                    "arrival_airport": f.arrival_airport,
                    "departure_time": f.departure_time,
                    "direction": f.direction,
                    "distance_km": round(f.distance),
                    "curvature": f.curvature,
                }
                for f in self.processed
            ],
            columns=columns,
        )

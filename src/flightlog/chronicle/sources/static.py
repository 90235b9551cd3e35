"""In-memory providers, backed by the bundled data unless given records."""

from typing import Iterable, List, Optional

from flightlog.chronicle.models import Airport, Flight
from flightlog.reference import airports as bundled


class StaticAirportSource:
    """Airport provider over a fixed list."""

    def __init__(self, airports: Optional[Iterable[Airport]] = None):
        self._airports = tuple(airports) if airports is not None else tuple(bundled.bundled_airports())
        self._index = {a.code: a for a in self._airports}

    def list(self) -> List[Airport]:
        return list(self._airports)

    def by_code(self, code: str) -> Optional[Airport]:
        return self._index.get(code)


class StaticFlightSource:
    """Flight provider over a fixed list."""

    def __init__(self, flights: Optional[Iterable[Flight]] = None):
        self._flights = tuple(flights) if flights is not None else tuple(bundled.bundled_flights())

    def list(self) -> List[Flight]:
        return list(self._flights)

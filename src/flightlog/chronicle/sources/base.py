"""Provider interfaces for airport and flight data."""

from collections import Counter
from typing import Iterable, List, Optional, Protocol, runtime_checkable

from flightlog.chronicle.models import Airport, Flight


@runtime_checkable
class AirportProvider(Protocol):
    """Protocol for airport reference data providers."""

    def list(self) -> List[Airport]:
        """All known airports."""
        ...

    def by_code(self, code: str) -> Optional[Airport]:
        """Airport for a code, or None if unknown."""
        ...


@runtime_checkable
class FlightProvider(Protocol):
    """Protocol for flight log providers."""

    def list(self) -> List[Flight]:
        """All logged flights."""
        ...


def find_unresolved_codes(flights: Iterable[Flight], airports: Iterable[Airport]) -> Counter:
    """Airport codes referenced by flights but absent from airports, with counts."""
    known = {a.code for a in airports}
    missing: Counter = Counter()
    for f in flights:
        for code in (f.departure_airport, f.arrival_airport):
            if code not in known:
                missing[code] += 1
    return missing

"""Providers reading JSON arrays from an HTTP endpoint."""

import logging
from typing import Any, List, Optional

import requests

from flightlog.chronicle.models import Airport, Flight

log = logging.getLogger(__name__)


def fetch_json_array(url: str, timeout: int) -> List[dict]:
    """GET a JSON array of objects. HTTP errors propagate."""
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    data: Any = resp.json()
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array from {url}, got {type(data).__name__}")
    rows = [row for row in data if isinstance(row, dict)]
    if len(rows) != len(data):
        log.warning("Skipped %d non-object entries from %s", len(data) - len(rows), url)
    log.info("Fetched %d records from %s", len(rows), url)
    return rows


class HttpAirportSource:
    """Airport provider backed by an endpoint returning Airport objects."""

    def __init__(self, url: str, timeout: int = 30):
        self.url = url
        self.timeout = timeout
        self._airports: Optional[List[Airport]] = None

    def list(self) -> List[Airport]:
        if self._airports is None:
            self._airports = [Airport.from_dict(row) for row in fetch_json_array(self.url, self.timeout)]
        return list(self._airports)

    def by_code(self, code: str) -> Optional[Airport]:
        for airport in self.list():
            if airport.code == code:
                return airport
        return None


class HttpFlightSource:
    """Flight provider backed by an endpoint returning Flight objects (camelCase keys)."""

    def __init__(self, url: str, timeout: int = 30):
        self.url = url
        self.timeout = timeout
        self._flights: Optional[List[Flight]] = None

    def list(self) -> List[Flight]:
        if self._flights is None:
            self._flights = [Flight.from_dict(row) for row in fetch_json_array(self.url, self.timeout)]
        return list(self._flights)

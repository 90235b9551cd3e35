"""Unit tests for airport and flight providers."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from flightlog.chronicle.models import Airport, Flight
from flightlog.chronicle.sources import (
    AirportProvider,
    FlightProvider,
    HttpAirportSource,
    HttpFlightSource,
    StaticAirportSource,
    StaticFlightSource,
    find_unresolved_codes,
)

AIRPORTS_PAYLOAD = [
    {"code": "HGH", "name": "Hangzhou Xiaoshan", "latitude": 30.234345, "longitude": 120.437058},
    {"code": "SIN", "name": "Singapore Changi", "latitude": 1.3644, "longitude": 103.9915},
]

FLIGHTS_PAYLOAD = [
    {
        "flightNumber": "MF8703",
        "departureTime": "2024-07-10T08:15:00",
        "departureAirport": "HGH",
        "arrivalAirport": "SIN",
    },
]


class TestStaticSources:
    """Tests for in-memory providers."""

    def test_defaults_to_bundled_data(self) -> None:
        airports = StaticAirportSource()
        flights = StaticFlightSource()
        assert airports.by_code("HGH") is not None
        assert len(flights.list()) == 44

    def test_given_records(self, airports, flights) -> None:
        source = StaticAirportSource(airports)
        assert source.list() == airports
        assert source.by_code("NRT").name == "Narita"
        assert source.by_code("XXX") is None
        assert StaticFlightSource(flights).list() == flights

    def test_list_returns_copies(self, flights) -> None:
        source = StaticFlightSource(flights)
        source.list().clear()
        assert len(source.list()) == 3

    def test_satisfy_protocols(self) -> None:
        assert isinstance(StaticAirportSource([]), AirportProvider)
        assert isinstance(StaticFlightSource([]), FlightProvider)


class TestHttpSources:
    """Tests for HTTP providers with mocked requests."""

    @patch("flightlog.chronicle.sources.remote.requests.get")
    def test_airports(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = AIRPORTS_PAYLOAD
        mock_get.return_value.raise_for_status = MagicMock()

        source = HttpAirportSource("http://localhost/api/airports", timeout=5)
        airports = source.list()

        assert [a.code for a in airports] == ["HGH", "SIN"]
        assert isinstance(airports[0], Airport)
        assert source.by_code("SIN").latitude == 1.3644
        mock_get.assert_called_once_with("http://localhost/api/airports", timeout=5)

    @patch("flightlog.chronicle.sources.remote.requests.get")
    def test_flights(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = FLIGHTS_PAYLOAD
        mock_get.return_value.raise_for_status = MagicMock()

        flights = HttpFlightSource("http://localhost/api/flights").list()

        assert flights == [Flight("MF8703", "HGH", "SIN", "2024-07-10T08:15:00")]

    @patch("flightlog.chronicle.sources.remote.requests.get")
    def test_fetched_once(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = FLIGHTS_PAYLOAD
        mock_get.return_value.raise_for_status = MagicMock()

        source = HttpFlightSource("http://localhost/api/flights")
        source.list()
        source.list()

        mock_get.assert_called_once()

    @patch("flightlog.chronicle.sources.remote.requests.get")
    def test_non_array_payload_raises(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = {"flights": FLIGHTS_PAYLOAD}
        mock_get.return_value.raise_for_status = MagicMock()

        with pytest.raises(ValueError, match="Expected a JSON array"):
            HttpFlightSource("http://localhost/api/flights").list()

    @patch("flightlog.chronicle.sources.remote.requests.get")
    def test_non_object_entries_skipped(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = AIRPORTS_PAYLOAD + ["junk", 3]
        mock_get.return_value.raise_for_status = MagicMock()

        assert len(HttpAirportSource("http://localhost/api/airports").list()) == 2

    @patch("flightlog.chronicle.sources.remote.requests.get")
    def test_http_error_propagates(self, mock_get: MagicMock) -> None:
        mock_get.return_value.raise_for_status.side_effect = requests.HTTPError("404")

        with pytest.raises(requests.HTTPError):
            HttpAirportSource("http://localhost/api/airports").list()


class TestFindUnresolvedCodes:
    """Tests for find_unresolved_codes."""

    def test_counts_missing(self, airports) -> None:
        flights = [
            Flight("ZZ1", "PEK", "XXX", "2024-01-01"),
            Flight("ZZ2", "XXX", "YYY", "2024-01-02"),
        ]
        missing = find_unresolved_codes(flights, airports)
        assert missing == {"XXX": 2, "YYY": 1}

    def test_all_resolved(self, flights, airports) -> None:
        assert not find_unresolved_codes(flights, airports)

    def test_bundled_data_resolves(self) -> None:
        assert not find_unresolved_codes(StaticFlightSource().list(), StaticAirportSource().list())

"""Unit tests for statistics and filter facets."""

import pytest

from flightlog.chronicle.models import Flight
from flightlog.chronicle.stats import (
    FlightStatistics,
    calculate_flight_statistics,
    get_available_airlines,
    get_available_years,
)


class TestCalculateFlightStatistics:
    """Tests for calculate_flight_statistics."""

    def test_fixture(self, flights, airports) -> None:
        stats = calculate_flight_statistics(flights, airports)
        assert stats.total_flights == 3
        assert stats.total_distance > 0
        assert {d.code for d in stats.top_destinations} == {"PVG", "PEK", "LAX"}
        assert len(stats.top_destinations) == 3
        assert stats.longest_flight is not None
        assert stats.longest_flight.origin == "NRT"
        assert stats.longest_flight.destination == "LAX"
        assert stats.shortest_flight is not None
        assert stats.shortest_flight.origin in ("PEK", "PVG")

    def test_total_distance_is_rounded_sum(self, flights, airports) -> None:
        stats = calculate_flight_statistics(flights, airports)
        assert isinstance(stats.total_distance, int)
        legs = [stats.longest_flight.distance, stats.shortest_flight.distance]
        # Two PEK-PVG legs plus NRT-LAX, each within rounding of the leg figures
        assert abs(stats.total_distance - (legs[0] + 2 * legs[1])) <= 2

    def test_top_destinations_ordered_and_capped(self, airports) -> None:
        flights = (
            [Flight("CA1", "PEK", "PVG", "2024-01-01")] * 3
            + [Flight("CA2", "PVG", "PEK", "2024-01-02")] * 2
            + [Flight("JL1", "PEK", "NRT", "2024-01-03")]
            + [Flight("JL2", "PEK", "LAX", "2024-01-04")]
            + [Flight("XX1", "PEK", "EAST", "2024-01-05")]
            + [Flight("XX2", "PEK", "WEST", "2024-01-06")]
        )
        stats = calculate_flight_statistics(flights, airports)
        codes = [d.code for d in stats.top_destinations]
        assert len(codes) == 5
        assert codes[:2] == ["PVG", "PEK"]
        # Ties keep first-seen order
        assert codes[2:] == ["NRT", "LAX", "EAST"]
        assert stats.top_destinations[0].count == 3

    def test_unknown_destination_name_falls_back_to_code(self, airports) -> None:
        stats = calculate_flight_statistics([Flight("CA1", "PEK", "XXX", "2024-01-01")], airports)
        assert stats.top_destinations[0].name == "XXX"
        # Unresolved legs do not contribute distance
        assert stats.total_distance == 0
        assert stats.longest_flight is None
        assert stats.shortest_flight is None

    def test_top_airline(self, flights, airports) -> None:
        stats = calculate_flight_statistics(flights, airports)
        assert stats.top_airline is not None
        assert stats.top_airline.code == "CA"
        assert stats.top_airline.name == "Air China"
        assert stats.top_airline.count == 2

    def test_top_airline_unknown_name_falls_back(self, airports) -> None:
        stats = calculate_flight_statistics([Flight("Q91", "PEK", "PVG", "2024-01-01")], airports)
        assert stats.top_airline.name == "Q9"

    def test_empty(self, airports) -> None:
        stats = calculate_flight_statistics([], airports)
        assert stats == FlightStatistics()
        assert stats.total_flights == 0
        assert stats.total_distance == 0
        assert stats.top_destinations == []
        assert stats.top_airline is None
        assert stats.longest_flight is None
        assert stats.shortest_flight is None

    def test_idempotent(self, flights, airports) -> None:
        assert calculate_flight_statistics(flights, airports) == calculate_flight_statistics(
            flights, airports
        )

    def test_to_dict(self, flights, airports) -> None:
        d = calculate_flight_statistics(flights, airports).to_dict()
        assert d["totalFlights"] == 3
        assert d["longestFlight"]["from"] == "NRT"
        assert d["longestFlight"]["to"] == "LAX"
        assert d["topAirline"]["code"] == "CA"
        assert calculate_flight_statistics([], airports).to_dict()["longestFlight"] is None

    def test_destinations_dataframe(self, flights, airports) -> None:
        df = calculate_flight_statistics(flights, airports).destinations_dataframe()
        assert list(df.columns) == ["code", "name", "count"]
        assert len(df) == 3
        assert FlightStatistics().destinations_dataframe().empty


class TestFacets:
    """Tests for get_available_years and get_available_airlines."""

    def test_years_single(self, flights) -> None:
        assert get_available_years(flights) == ["2023"]

    def test_years_newest_first(self) -> None:
        flights = [
            Flight("CA1", "PEK", "PVG", "2021-10-11T11:00:00"),
            Flight("CA2", "PEK", "PVG", "2025-02-05T19:05:00"),
            Flight("CA3", "PEK", "PVG", "2023-05-04T18:50:00"),
        ]
        assert get_available_years(flights) == ["2025", "2023", "2021"]

    def test_years_malformed_propagates(self) -> None:
        with pytest.raises(ValueError):
            get_available_years([Flight("CA1", "PEK", "PVG", "garbage")])

    def test_airlines(self, flights) -> None:
        assert get_available_airlines(flights) == ["CA", "JL"]

    def test_empty(self) -> None:
        assert get_available_years([]) == []
        assert get_available_airlines([]) == []

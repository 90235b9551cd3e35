#!/usr/bin/env python3
"""
Validate a flight log against the airport list.

Reports airport codes referenced by flights but missing from the airport
data (those flights are not drawn on the map), plus flights with unparseable
departure times, sorted by frequency.

Usage:
    python scripts/validate_flight_data.py                       # bundled data
    python scripts/validate_flight_data.py --airports a.json --flights f.json
"""

import argparse
import json
import sys
from pathlib import Path

from flightlog.chronicle.models import Airport, Flight
from flightlog.chronicle.sources import StaticAirportSource, StaticFlightSource, find_unresolved_codes


def _load_records(path: Path, cls):
    with open(path, encoding="utf-8") as f:
        rows = json.load(f)
    if not isinstance(rows, list):
        print(f"{path}: expected a JSON array", file=sys.stderr)
        sys.exit(1)
    return [cls.from_dict(row) for row in rows]


def _invalid_times(flights: list[Flight]) -> list[Flight]:
    bad = []
    for f in flights:
        try:
            f.departure_datetime()
        except ValueError:
            bad.append(f)
    return bad


def main() -> None:
    parser = argparse.ArgumentParser(description="Validate flight log data")
    parser.add_argument("--airports", type=Path, help="Airport JSON array (default: bundled)")
    parser.add_argument("--flights", type=Path, help="Flight JSON array (default: bundled)")
    args = parser.parse_args()

    airports = (
        _load_records(args.airports, Airport) if args.airports else StaticAirportSource().list()
    )
    flights = _load_records(args.flights, Flight) if args.flights else StaticFlightSource().list()
    print(f"Loaded {len(airports)} airports and {len(flights)} flights", file=sys.stderr)

    missing = find_unresolved_codes(flights, airports)
    bad_times = _invalid_times(flights)

    if missing:
        print(f"\nMissing airports ({len(missing)} codes):")
        for code, count in missing.most_common():
            print(f"  {code}: {count} reference(s)")
    if bad_times:
        print(f"\nUnparseable departure times ({len(bad_times)} flights):")
        for f in bad_times:
            print(f"  {f.flight_number} {f.route()}: {f.departure_time!r}")

    if missing or bad_times:
        sys.exit(1)
    print("\nAll flights resolve and have valid departure times.")


if __name__ == "__main__":
    main()

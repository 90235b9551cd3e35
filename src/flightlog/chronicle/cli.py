"""CLI for the flight log."""

import argparse
import sys

from flightlog.chronicle.models import FlightFilter
from flightlog.chronicle.service import FlightLogService
from flightlog.config import load_settings
from flightlog.logging_config import setup_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Summarize and map a personal flight log"
    )
    parser.add_argument(
        "--year",
        "-y",
        help="Only flights departing in this year (YYYY)",
    )
    parser.add_argument(
        "--airline",
        "-a",
        help="Only flights of this airline (2-letter prefix, e.g. MF)",
    )
    parser.add_argument(
        "--until",
        "-u",
        help="Timeline cut-off: only flights departing at or before this ISO date/time",
    )
    parser.add_argument(
        "--stats",
        "-s",
        action="store_true",
        help="Include statistics summary",
    )
    parser.add_argument(
        "--airport",
        help="List flights touching this airport code, newest first",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write processed flights to CSV file",
    )
    parser.add_argument(
        "--map",
        "-m",
        help="Write an interactive HTML map to this path",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default from FLIGHTLOG_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def print_statistics(view, service: FlightLogService) -> None:
    stats = view.statistics
    print(f"\nTotal flights: {stats.total_flights}")
    print(f"Total distance: {stats.total_distance:,} km")
    if stats.top_airline:
        print(f"Top airline: {stats.top_airline.name} ({stats.top_airline.count})")
    if stats.longest_flight:
        lf = stats.longest_flight
        print(f"Longest flight: {lf.origin} -> {lf.destination} ({lf.distance:,} km)")
    if stats.shortest_flight:
        sf = stats.shortest_flight
        print(f"Shortest flight: {sf.origin} -> {sf.destination} ({sf.distance:,} km)")
    if stats.top_destinations:
        print("\nTop destinations:")
        for d in stats.top_destinations:
            print(f"  {d.code} {d.name}: {d.count}")
    if view.activity:
        print("\nAirport activity:")
        for code, count in sorted(view.activity.items(), key=lambda x: -x[1]):
            print(f"  {code}: {count}")
    print(f"\nYears: {', '.join(service.years())}")
    print(f"Airlines: {', '.join(service.airlines())}")
    print()


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings()
    setup_logging(args.log_level or settings.log_level)

    try:
        flight_filter = FlightFilter.from_strings(
            year=args.year, airline=args.airline, until=args.until
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    service = FlightLogService.from_settings(settings)
    try:
        view = service.view(flight_filter)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.stats:
        print_statistics(view, service)

    if args.airport:
        code = args.airport.upper().strip()
        related = service.related_flights(code, flight_filter)
        print(f"\nFlights touching {code}: {len(related)}")
        for f in related:
            print(f"  {f.departure_time}  {f.flight_number:<8} {f.route()}")
        print()

    df = view.to_dataframe()
    if df.empty:
        print("No flights found.", file=sys.stderr)
    else:
        print(df.to_string(index=False))

    if args.output and not df.empty:
        df.to_csv(args.output, index=False)
        print(f"\nWrote {len(df)} rows to {args.output}", file=sys.stderr)

    if args.map:
        from flightlog.chronicle.render import build_map_figure

        fig = build_map_figure(view.processed, service.airports(), view.activity)
        fig.write_html(args.map, include_plotlyjs="cdn")
        print(f"Wrote map to {args.map}", file=sys.stderr)


if __name__ == "__main__":
    main()

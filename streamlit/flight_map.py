"""
Flight Map - personal flight history on a Pacific-centered world map.

Features: year / airline filters, timeline slider, statistics panel,
airport deep dive with related flights.

Run with: streamlit run streamlit/flight_map.py
"""

import pandas as pd
import streamlit as st

from flightlog.chronicle.models import FlightFilter
from flightlog.chronicle.render import build_map_figure
from flightlog.chronicle.service import FlightLogService
from flightlog.config import load_settings
from flightlog.reference import get_airline_name


@st.cache_resource
def get_service() -> FlightLogService:
    """One service per session; it memoizes views per filter state."""
    return FlightLogService.from_settings(load_settings())


def main() -> None:
    st.set_page_config(page_title="Flight Path Chronicle", layout="wide")
    st.title("Flight Path Chronicle")

    service = get_service()
    years = service.years()
    airlines = service.airlines()

    with st.sidebar:
        st.header("Filters")
        sel_year = st.selectbox("Year", options=["all"] + years, index=0)
        sel_airline = st.selectbox(
            "Airline",
            options=["all"] + airlines,
            index=0,
            format_func=lambda c: "All airlines" if c == "all" else f"{c} - {get_airline_name(c) or c}",
        )
        base_filter = FlightFilter.from_strings(year=sel_year, airline=sel_airline)

        timeline = service.timeline(base_filter)
        until = None
        if timeline is not None and st.checkbox("Timeline mode", value=False):
            progress = st.slider("Timeline", min_value=0.0, max_value=100.0, value=100.0, step=0.1)
            until = timeline.moment_at(progress)
            st.caption(f"Showing flights until {until:%Y-%m-%d}")

    flight_filter = FlightFilter(year=base_filter.year, airline=base_filter.airline, until=until)
    view = service.view(flight_filter)
    stats = view.statistics

    col_dist, col_count, col_airline = st.columns(3)
    col_dist.metric("Total distance", f"{stats.total_distance:,} km")
    col_count.metric("Flights", f"{stats.total_flights:,}")
    col_airline.metric(
        "Top airline",
        f"{stats.top_airline.name} ({stats.top_airline.count})" if stats.top_airline else "-",
    )

    if not view.processed:
        st.info("No flights match the current filters.")
        return

    airport_codes = sorted(view.activity)
    sel_airport = st.selectbox("Airport details", options=["none"] + airport_codes, index=0)
    highlight = None if sel_airport == "none" else sel_airport

    fig = build_map_figure(view.processed, service.airports(), view.activity, highlight=highlight)
    st.plotly_chart(fig, width="stretch")

    col_routes, col_dest = st.columns(2)
    with col_routes:
        if stats.longest_flight:
            lf = stats.longest_flight
            st.write(f"**Longest flight:** {lf.origin} → {lf.destination} ({lf.distance:,} km)")
        if stats.shortest_flight:
            sf = stats.shortest_flight
            st.write(f"**Shortest flight:** {sf.origin} → {sf.destination} ({sf.distance:,} km)")
    with col_dest:
        st.subheader("Top destinations")
        st.dataframe(stats.destinations_dataframe(), hide_index=True)

    if highlight:
        related = service.related_flights(highlight, flight_filter)
        st.subheader(f"Flights touching {highlight} ({len(related)})")
        st.dataframe(
            pd.DataFrame([f.to_dict() for f in related]),
            hide_index=True,
        )

    with st.expander("All flights"):
        st.dataframe(view.to_dataframe(), hide_index=True)


main()

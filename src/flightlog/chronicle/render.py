"""Plotly map of processed flights on a Pacific-centered projection."""

from typing import Dict, Iterable, Optional

import plotly.graph_objects as go

from flightlog.chronicle.geo import curve_points, normalized
from flightlog.chronicle.models import Airport, Coordinate, ProcessedFlight
from flightlog.config import MAP_CONFIG, MapConfig

CURVE_SAMPLES = 32


def flight_curve(
    flight: ProcessedFlight, departure: Airport, arrival: Airport, samples: int = CURVE_SAMPLES
):
    """Curve from the normalized departure to the (date-line corrected) arrival."""
    start = normalized(departure)
    end: Coordinate = flight.arrival_airport_modified or normalized(arrival)
    return curve_points(start, end, flight.curvature, samples=samples)


def build_map_figure(
    processed: Iterable[ProcessedFlight],
    airports: Iterable[Airport],
    activity: Dict[str, int],
    map_config: MapConfig = MAP_CONFIG,
    height: int = 650,
    highlight: Optional[str] = None,
) -> go.Figure:
    """One line trace per flight, then airport markers sized by activity."""
    index = {a.code: a for a in airports}
    fig = go.Figure()

    for f in processed:
        departure = index.get(f.departure_airport)
        arrival = index.get(f.arrival_airport)
        if departure is None or arrival is None:
            continue
        lats, lons = flight_curve(f, departure, arrival)
        touches = highlight in (f.departure_airport, f.arrival_airport)
        fig.add_trace(go.Scattergeo(
            lat=lats, lon=lons,
            mode="lines",
            line=dict(width=3 if touches else 1.5, color=f.color),
            opacity=0.9 if touches or highlight is None else 0.35,
            text=f"{f.flight_number} {f.route()} ({f.distance:,.0f} km)",
            hoverinfo="text", showlegend=False,
        ))

    active = [index[code] for code in activity if code in index]
    if active:
        counts = [activity[a.code] for a in active]
        fig.add_trace(go.Scattergeo(
            lat=[a.latitude for a in active],
            lon=[normalized(a).longitude for a in active],
            text=[f"{a.name} ({a.code}): {activity[a.code]} movements" for a in active],
            mode="markers",
            marker=dict(
                size=[6 + 2.5 * c ** 0.5 for c in counts],
                color=["#facc15" if a.code == highlight else "#e5e7eb" for a in active],
                line=dict(width=1, color="#374151"),
            ),
            hoverinfo="text", showlegend=False,
        ))

    center_lat, center_lon = map_config.default_center
    fig.update_geos(
        projection_type="natural earth",
        projection_rotation=dict(lon=map_config.center_longitude),
        center=dict(lat=center_lat, lon=center_lon),
        projection_scale=map_config.default_zoom / 2,
        showland=True,
        landcolor="rgb(55,65,81)",
        showocean=True,
        oceancolor="rgb(17,24,39)",
        showcountries=True,
        countrycolor="rgba(150,150,150,0.6)",
        countrywidth=0.5,
        coastlinewidth=0.5,
    )
    fig.update_layout(
        height=height, margin=dict(l=0, r=0, t=0, b=0), showlegend=False,
        paper_bgcolor="rgb(17,24,39)",
    )
    return fig

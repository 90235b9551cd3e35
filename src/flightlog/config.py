"""Environment-driven settings and map defaults.

Env vars:
- FLIGHTLOG_AIRPORTS_URL -> HTTP endpoint returning a JSON array of airports
- FLIGHTLOG_FLIGHTS_URL  -> HTTP endpoint returning a JSON array of flights
- FLIGHTLOG_HTTP_TIMEOUT -> request timeout in seconds (default 30)
- FLIGHTLOG_LOG_LEVEL    -> logging level name (default INFO)

Without the URLs the bundled reference data is used.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MapConfig:
    """Initial view of the Pacific-centered map."""

    default_center: tuple[float, float] = (35.0, 105.0)
    default_zoom: int = 4
    min_zoom: int = 2
    # Longitudes run past 180 so Asia sits left of the Americas
    max_bounds: tuple[tuple[float, float], tuple[float, float]] = ((-90.0, -20.0), (90.0, 380.0))

    @property
    def center_longitude(self) -> float:
        """Longitude the projection is rotated to (middle of the bounds)."""
        (_, west), (_, east) = self.max_bounds
        return (west + east) / 2


MAP_CONFIG = MapConfig()


@dataclass
class Settings:
    airports_url: Optional[str] = field(default_factory=lambda: os.getenv("FLIGHTLOG_AIRPORTS_URL") or None)
    flights_url: Optional[str] = field(default_factory=lambda: os.getenv("FLIGHTLOG_FLIGHTS_URL") or None)
    http_timeout: int = field(default_factory=lambda: int(os.getenv("FLIGHTLOG_HTTP_TIMEOUT", "30")))
    log_level: str = field(default_factory=lambda: os.getenv("FLIGHTLOG_LOG_LEVEL", "INFO"))


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()

"""Personal flight history: route geometry, statistics and map rendering."""

__version__ = "0.1.0"

"""Bundled airport and flight log data."""

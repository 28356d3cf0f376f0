"""Which Platform? - upcoming train departures between two stations."""

__version__ = "0.1.0"

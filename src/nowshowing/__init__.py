"""Today's cinema showtimes as a small, stable JSON snapshot."""

__version__ = "0.1.0"

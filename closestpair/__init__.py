"""Closest pair of points algorithms, timing statistics and a benchmark command."""

__version__ = "0.1.0"
__all__ = ["geometry", "stats", "cli"]
"""Workout log — map-based run and ride logging with client-side persistence."""

__version__ = "0.1.0"

"""Clockwall - a wall of analog clocks that spells out the time."""

__version__ = "0.1.0"

"""Pytest configuration for benchmarks."""

from datetime import datetime

import pytest

from clockwall.app import ClockwallApp


@pytest.fixture
def animating_app():
    """A full-HD clock wall in the middle of a minute change."""
    clock_app = ClockwallApp(width=1920, height=1080)
    clock_app.update(16, datetime(2024, 1, 1, 9, 59, 59))
    clock_app.update(16, datetime(2024, 1, 1, 10, 0, 0))
    return clock_app

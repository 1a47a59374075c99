"""Detects minute changes and drives the clock grid."""

from datetime import datetime
from enum import Enum
from typing import Optional

from clockwall.clock.grid import ClockGrid, validate_time_string
from clockwall.logging.config import get_logger

logger = get_logger(__name__)


def format_display_time(hour: int, minute: int) -> str:
    """
    Format a wall-clock time as the 4-character display string.

    Hours after noon are folded to 1-11; 12 stays "12" and midnight is "00".

    Args:
        hour: 0-23
        minute: 0-59

    Returns:
        Zero padded HHMM string
    """
    if not 0 <= hour <= 23:
        raise ValueError(f"Hour must be 0-23, got {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"Minute must be 0-59, got {minute}")
    display_hour = hour - 12 if hour > 12 else hour
    return f"{display_hour:02d}{minute:02d}"


class WatcherState(Enum):
    """Time watcher status."""
    UNINITIALIZED = "uninitialized"  # Nothing shown yet
    TRACKING = "tracking"            # Holding the last shown time


class TimeWatcher:
    """Compares each sampled time with the last one shown."""

    def __init__(self, grid: ClockGrid):
        self.grid = grid
        self.state = WatcherState.UNINITIALIZED
        self.last_time: Optional[str] = None

    def observe(self, time_str: str) -> bool:
        """
        Feed one sampled display time.

        Args:
            time_str: HHMM display string

        Returns:
            True if the grid was updated
        """
        validate_time_string(time_str)

        if self.state is WatcherState.UNINITIALIZED:
            self.grid.set_time(time_str)
            self.last_time = time_str
            logger.info(f"State transition: {self.state.value} -> {WatcherState.TRACKING.value}")
            self.state = WatcherState.TRACKING
            return True

        if time_str == self.last_time:
            return False

        logger.info(f"Time changed: {self.last_time} -> {time_str}")
        self.grid.animate_time(time_str)
        self.last_time = time_str
        return True

    def sample(self, now: datetime) -> bool:
        """Observe the display time of a wall-clock reading."""
        return self.observe(format_display_time(now.hour, now.minute))

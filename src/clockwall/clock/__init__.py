"""Clock wall core: digit encoding, clock animation and time tracking."""

from clockwall.clock.digits import DIGIT_TABLE, encode, to_angles
from clockwall.clock.exceptions import ClockwallError, InvalidDigitError, MalformedTimeError
from clockwall.clock.face import ANIMATION_DURATION_MS, Clock
from clockwall.clock.grid import ClockGrid
from clockwall.clock.layout import ClockShape, compute_shape
from clockwall.clock.watcher import TimeWatcher, WatcherState, format_display_time

__all__ = [
    "ANIMATION_DURATION_MS",
    "Clock",
    "ClockGrid",
    "ClockShape",
    "ClockwallError",
    "DIGIT_TABLE",
    "InvalidDigitError",
    "MalformedTimeError",
    "TimeWatcher",
    "WatcherState",
    "compute_shape",
    "encode",
    "format_display_time",
    "to_angles",
]

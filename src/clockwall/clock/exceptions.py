"""Errors raised by the clock core."""


class ClockwallError(ValueError):
    """Base class for Clockwall precondition violations."""


class InvalidDigitError(ClockwallError):
    """Raised when a character outside '0'-'9' is looked up in the digit table."""

    def __init__(self, digit: object):
        self.digit = digit
        super().__init__(f"Not a decimal digit: {digit!r}")


class MalformedTimeError(ClockwallError):
    """Raised when a display time string is not exactly four digits."""

    def __init__(self, time_str: object):
        self.time_str = time_str
        super().__init__(f"Display time must be 4 digits (HHMM), got {time_str!r}")

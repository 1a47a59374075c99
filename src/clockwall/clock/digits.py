"""Digit to hand-angle encoding.

Each digit is drawn by a 2 column x 3 row block of clocks. The table stores,
per digit, six raw ``(hour, minute)`` pointer positions in raster order::

    (col0,row0) (col1,row0)
    (col0,row1) (col1,row1)
    (col0,row2) (col1,row2)

The values are pointer directions, not times of day. ``(7, 35)`` parks both
hands on the same diagonal so the clock reads as "blank".
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from clockwall.clock.exceptions import InvalidDigitError
from clockwall.geometry import Vector2

CLOCKS_PER_DIGIT = 6

RawPair = Tuple[int, int]

DIGIT_TABLE: Mapping[str, Tuple[RawPair, ...]] = MappingProxyType(
    {
        "0": (
            (3, 30), (6, 45),
            (12, 30), (12, 30),
            (12, 15), (12, 45),
        ),
        "1": (
            (7, 35), (6, 30),
            (7, 35), (12, 30),
            (7, 35), (12, 0),
        ),
        "2": (
            (3, 15), (9, 30),
            (3, 30), (12, 45),
            (12, 15), (9, 45),
        ),
        "3": (
            (3, 15), (9, 30),
            (3, 15), (12, 45),
            (3, 15), (12, 45),
        ),
        "4": (
            (6, 30), (6, 30),
            (12, 15), (12, 45),
            (7, 35), (12, 0),
        ),
        "5": (
            (3, 30), (9, 45),
            (12, 15), (9, 30),
            (3, 15), (12, 45),
        ),
        "6": (
            (3, 30), (9, 45),
            (12, 30), (9, 30),
            (12, 15), (12, 45),
        ),
        "7": (
            (3, 15), (9, 30),
            (7, 35), (12, 30),
            (7, 35), (12, 0),
        ),
        "8": (
            (3, 30), (6, 45),
            (12, 15), (12, 45),
            (12, 15), (12, 45),
        ),
        "9": (
            (3, 30), (6, 45),
            (12, 15), (12, 30),
            (7, 35), (12, 0),
        ),
    }
)


def to_angles(hour: float, minute: float) -> Vector2:
    """
    Convert a raw pointer pair to hand angles in degrees.

    Args:
        hour: Hour-hand position on a 12 hour dial
        minute: Minute-hand position on a 60 minute dial

    Returns:
        Vector2 of (hour angle, minute angle), 0 degrees pointing at 3 o'clock
    """
    return Vector2(hour / 12 * 360 - 90, minute / 60 * 360 - 90)


def _build_encodings() -> Mapping[str, Tuple[Vector2, ...]]:
    return MappingProxyType(
        {digit: tuple(to_angles(*pair) for pair in pairs) for digit, pairs in DIGIT_TABLE.items()}
    )


_ENCODINGS = _build_encodings()


def encode(digit: str) -> Tuple[Vector2, ...]:
    """
    Look up the six angle pairs for a digit.

    Args:
        digit: A single character '0' to '9'

    Returns:
        Six angle pairs in raster order (left/right per row, top to bottom)

    Raises:
        InvalidDigitError: If ``digit`` is not a decimal digit character
    """
    if not isinstance(digit, str):
        raise InvalidDigitError(digit)
    try:
        return _ENCODINGS[digit]
    except KeyError:
        raise InvalidDigitError(digit) from None

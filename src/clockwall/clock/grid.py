"""The 8x3 wall of clocks that spells HHMM."""

from typing import Iterator, List

from clockwall.clock.digits import encode
from clockwall.clock.exceptions import MalformedTimeError
from clockwall.clock.face import ANIMATION_DURATION_MS, Clock
from clockwall.clock.layout import GRID_COLUMNS, GRID_ROWS, ClockShape
from clockwall.geometry import Vector2
from clockwall.logging.config import get_logger
from clockwall.render.palette import ColorScheme
from clockwall.render.surface import Surface

logger = get_logger(__name__)

DIGIT_COUNT = 4
DIGIT_COLUMNS = 2


def validate_time_string(time_str: str) -> str:
    """
    Check a display time string.

    Raises:
        MalformedTimeError: Unless ``time_str`` is exactly four ASCII digits
    """
    if (
        not isinstance(time_str, str)
        or len(time_str) != DIGIT_COUNT
        or not all(c in "0123456789" for c in time_str)
    ):
        raise MalformedTimeError(time_str)
    return time_str


class ClockGrid:
    """Owns all clocks and routes each digit to its 2x3 block."""

    def __init__(self, duration_ms: float = ANIMATION_DURATION_MS):
        self.clocks: List[List[Clock]] = [
            [Clock(Vector2(x, y), duration_ms) for y in range(GRID_ROWS)]
            for x in range(GRID_COLUMNS)
        ]

    def __iter__(self) -> Iterator[Clock]:
        for column in self.clocks:
            yield from column

    def __len__(self) -> int:
        return GRID_COLUMNS * GRID_ROWS

    def clock_at(self, column: int, row: int) -> Clock:
        return self.clocks[column][row]

    @property
    def is_animating(self) -> bool:
        return any(clock.is_animating for clock in self)

    def digit_clocks(self, n: int) -> List[Clock]:
        """
        Clocks of digit position ``n`` in raster order.

        Args:
            n: Digit position, 1 (hour tens) to 4 (minute units)

        Returns:
            Six clocks: left/right for each row, top row first
        """
        if not 1 <= n <= DIGIT_COUNT:
            raise ValueError(f"Digit position must be 1-{DIGIT_COUNT}, got {n}")
        first = (n - 1) * DIGIT_COLUMNS
        return [
            self.clocks[x][y]
            for y in range(GRID_ROWS)
            for x in range(first, first + DIGIT_COLUMNS)
        ]

    def set_digit(self, n: int, digit: str) -> None:
        for clock, angles in zip(self.digit_clocks(n), encode(digit)):
            clock.snap_to(angles)

    def animate_digit(self, n: int, digit: str) -> None:
        for clock, angles in zip(self.digit_clocks(n), encode(digit)):
            clock.animate_to(angles)

    def set_time(self, time_str: str) -> None:
        """Show ``time_str`` (HHMM) immediately."""
        validate_time_string(time_str)
        for n, digit in enumerate(time_str, start=1):
            self.set_digit(n, digit)
        logger.info(f"Clock grid set to {time_str[:2]}:{time_str[2:]}")

    def animate_time(self, time_str: str) -> None:
        """Start animating every clock towards ``time_str`` (HHMM)."""
        validate_time_string(time_str)
        # Unchanged digits are re-targeted too; with target == current they stay put
        for n, digit in enumerate(time_str, start=1):
            self.animate_digit(n, digit)
        logger.debug(f"Clock grid animating to {time_str[:2]}:{time_str[2:]}")

    def advance(self, delta_ms: float) -> None:
        for clock in self:
            clock.advance(delta_ms)

    def render(
        self,
        surface: Surface,
        scheme: ColorScheme,
        shape: ClockShape,
        clock_weight: float = 1,
        hand_weight: float = 2,
    ) -> None:
        for clock in self:
            clock.render(surface, scheme, shape, clock_weight, hand_weight)

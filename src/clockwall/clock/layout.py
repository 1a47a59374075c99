"""Screen layout of the clock wall."""

from dataclasses import dataclass

from clockwall.geometry import Vector2

GRID_COLUMNS = 8
GRID_ROWS = 3

# Horizontal fill factor and vertical margin around the clock rows
WIDTH_FILL = 0.99
HEIGHT_MARGIN = 0.05


@dataclass(frozen=True)
class ClockShape:
    """Size and placement shared by every clock face for one frame."""

    offset: Vector2
    diameter: float
    bar_height: float

    @property
    def radius(self) -> float:
        return self.diameter / 2


def compute_shape(size: Vector2, bar_ratio: float) -> ClockShape:
    """
    Fit the 8x3 grid of clocks into a canvas, leaving room for the seconds bar.

    Args:
        size: Canvas (width, height) in pixels
        bar_ratio: Fraction of the canvas height used by the seconds bar

    Returns:
        ClockShape with the grid centred on the canvas
    """
    w_diameter = size.x / GRID_COLUMNS * WIDTH_FILL
    h_diameter = size.y / GRID_ROWS * (1 - bar_ratio - HEIGHT_MARGIN)
    diameter = min(w_diameter, h_diameter)

    total = Vector2(GRID_COLUMNS, GRID_ROWS) * diameter
    offset = (size - total) / 2

    return ClockShape(offset=offset, diameter=diameter, bar_height=size.y * bar_ratio)

"""SVG drawing surface."""

from typing import List, Optional

from clockwall.geometry import Vector2
from clockwall.render.surface import Surface


def _num(value: float) -> str:
    return f"{value:.2f}"


class SvgSurface(Surface):
    """Records draw calls as SVG elements."""

    def __init__(self, width: int, height: int):
        """
        Initialize surface.

        Args:
            width: SVG width
            height: SVG height
        """
        self.width = width
        self.height = height
        self.elements: List[str] = []
        self._stroke: Optional[str] = None
        self._stroke_weight: float = 1
        self._fill: Optional[str] = None

    def clear(self, color: str) -> None:
        # Anything drawn before is hidden by the background anyway
        self.elements = [f'<rect width="100%" height="100%" fill="{color}" />']

    def stroke(self, color: str, weight: float) -> None:
        self._stroke = color
        self._stroke_weight = weight

    def no_stroke(self) -> None:
        self._stroke = None

    def fill(self, color: str) -> None:
        self._fill = color

    def no_fill(self) -> None:
        self._fill = None

    def _paint(self) -> str:
        fill = self._fill or "none"
        if self._stroke is None:
            return f'fill="{fill}" stroke="none"'
        return f'fill="{fill}" stroke="{self._stroke}" stroke-width="{self._stroke_weight}"'

    def circle(self, center: Vector2, diameter: float) -> None:
        self.elements.append(
            f'<circle cx="{_num(center.x)}" cy="{_num(center.y)}" r="{_num(diameter / 2)}" {self._paint()} />'
        )

    def line(self, start: Vector2, end: Vector2) -> None:
        if self._stroke is None:
            return
        self.elements.append(
            f'<line x1="{_num(start.x)}" y1="{_num(start.y)}" x2="{_num(end.x)}" y2="{_num(end.y)}" '
            f'stroke="{self._stroke}" stroke-width="{self._stroke_weight}" stroke-linecap="round" />'
        )

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self.elements.append(
            f'<rect x="{_num(x)}" y="{_num(y)}" width="{_num(width)}" height="{_num(height)}" {self._paint()} />'
        )

    def to_svg(self) -> str:
        """Render the recorded elements as a standalone SVG document."""
        body = "\n    ".join(self.elements)
        return f"""<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<svg width="{self.width}" height="{self.height}" viewBox="0 0 {self.width} {self.height}" xmlns="http://www.w3.org/2000/svg">
    {body}
</svg>
"""

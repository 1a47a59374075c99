"""Two-dimensional vector used for angles, positions and grid indices."""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2D pair.

    Vector-vector and vector-scalar arithmetic are separate operations:
    ``+``/``-`` take another vector, ``*``/``/``/``shifted``
    take a number. Mixing them up raises ``TypeError``.
    """

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0, 0)

    @classmethod
    def from_angle(cls, degrees: float) -> "Vector2":
        """Unit vector pointing at ``degrees`` (0 along +x, y grows downward on screen)."""
        radians = math.radians(degrees)
        return cls(math.cos(radians), math.sin(radians))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Vector2":
        if not _is_scalar(k):
            return NotImplemented
        return Vector2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vector2":
        if not _is_scalar(k):
            return NotImplemented
        return Vector2(self.x / k, self.y / k)

    def shifted(self, k: float) -> "Vector2":
        """Add ``k`` to both components."""
        if not _is_scalar(k):
            raise TypeError(f"shifted() expects a number, got {type(k).__name__}")
        return Vector2(self.x + k, self.y + k)

    def lerp(self, other: "Vector2", t: float) -> "Vector2":
        """Per-axis linear interpolation towards ``other`` at fraction ``t``."""
        return self + (other - self) * t

    def is_close(self, other: "Vector2", abs_tol: float = 1e-9) -> bool:
        return math.isclose(self.x, other.x, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, abs_tol=abs_tol
        )

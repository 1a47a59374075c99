"""A single animated analog clock face."""

from typing import Tuple

from clockwall.clock.layout import ClockShape
from clockwall.geometry import Vector2
from clockwall.render.palette import ColorScheme
from clockwall.render.surface import Surface

ANIMATION_DURATION_MS = 2500.0


class Clock:
    """
    One clock face with an hour and a minute hand.

    ``angles`` always equals ``start_angles.lerp(target_angles, progress)``;
    once ``elapsed_ms`` reaches ``duration_ms`` the hands rest on the target.
    """

    def __init__(self, index: Vector2, duration_ms: float = ANIMATION_DURATION_MS):
        """
        Initialize clock.

        Args:
            index: (column, row) position in the clock grid
            duration_ms: Length of every hand animation
        """
        if duration_ms <= 0:
            raise ValueError(f"Animation duration must be positive, got {duration_ms}")
        self.index = index
        self.duration_ms = duration_ms

        self.angles = Vector2.zero()
        self.target_angles = Vector2.zero()
        self.start_angles = Vector2.zero()
        self.elapsed_ms = 0.0

    def __repr__(self) -> str:
        return f"Clock(index=({self.index.x}, {self.index.y}), angles=({self.angles.x:.1f}, {self.angles.y:.1f}))"

    @property
    def progress(self) -> float:
        """Fraction of the current animation that has elapsed."""
        return self.elapsed_ms / self.duration_ms

    @property
    def is_animating(self) -> bool:
        return self.elapsed_ms < self.duration_ms and self.angles != self.target_angles

    def snap_to(self, angles: Vector2) -> None:
        """Jump straight to ``angles`` without animating."""
        self.angles = angles
        self.start_angles = angles
        self.target_angles = angles
        self.elapsed_ms = 0.0

    def animate_to(self, angles: Vector2) -> None:
        """Start moving the hands from wherever they are now towards ``angles``."""
        self.start_angles = self.angles
        self.target_angles = angles
        self.elapsed_ms = 0.0

    def advance(self, delta_ms: float) -> None:
        """
        Move the animation forward.

        Args:
            delta_ms: Milliseconds since the previous frame
        """
        if delta_ms < 0:
            raise ValueError(f"Cannot advance by a negative time: {delta_ms}")
        self.elapsed_ms = min(self.elapsed_ms + delta_ms, self.duration_ms)
        if self.elapsed_ms == self.duration_ms:
            self.angles = self.target_angles
        else:
            self.angles = self.start_angles.lerp(self.target_angles, self.progress)

    def center(self, shape: ClockShape) -> Vector2:
        return shape.offset + self.index.shifted(0.5) * shape.diameter

    def hand_endpoints(self, shape: ClockShape) -> Tuple[Vector2, Vector2, Vector2]:
        """Return (center, hour-hand tip, minute-hand tip) in screen coordinates."""
        center = self.center(shape)
        hour_tip = Vector2.from_angle(self.angles.x) * shape.radius + center
        minute_tip = Vector2.from_angle(self.angles.y) * shape.radius + center
        return center, hour_tip, minute_tip

    def render(
        self,
        surface: Surface,
        scheme: ColorScheme,
        shape: ClockShape,
        clock_weight: float = 1,
        hand_weight: float = 2,
    ) -> None:
        """Draw the face outline and both hands."""
        center, hour_tip, minute_tip = self.hand_endpoints(shape)

        surface.stroke(scheme.accent, clock_weight)
        surface.no_fill()
        surface.circle(center, shape.diameter)

        surface.stroke(scheme.accent, hand_weight)
        surface.line(center, hour_tip)
        surface.line(center, minute_tip)

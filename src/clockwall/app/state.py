"""Application state for one running clock wall."""

from datetime import datetime
from typing import Optional, Sequence

from clockwall.clock.face import ANIMATION_DURATION_MS
from clockwall.clock.grid import ClockGrid
from clockwall.clock.layout import ClockShape, compute_shape
from clockwall.clock.watcher import TimeWatcher
from clockwall.config.settings import Settings
from clockwall.geometry import Vector2
from clockwall.logging.config import get_logger
from clockwall.render.palette import ColorScheme, Palette, default_schemes
from clockwall.render.surface import Surface

logger = get_logger(__name__)

MS_PER_MINUTE = 60_000


class ClockwallApp:
    """
    Everything the frame driver needs between frames.

    Owns the clock grid, its time watcher, the palette and the canvas layout.
    """

    def __init__(
        self,
        width: int,
        height: int,
        schemes: Optional[Sequence[ColorScheme]] = None,
        scheme_index: int = 1,
        duration_ms: float = ANIMATION_DURATION_MS,
        bar_ratio: float = 0.02,
        clock_weight: float = 1,
        hand_weight: float = 2,
    ):
        self.grid = ClockGrid(duration_ms)
        self.watcher = TimeWatcher(self.grid)
        self.palette = Palette(schemes or default_schemes(), scheme_index)
        self.bar_ratio = bar_ratio
        self.clock_weight = clock_weight
        self.hand_weight = hand_weight

        self.size = Vector2.zero()
        self.shape: Optional[ClockShape] = None
        self.resize(width, height)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClockwallApp":
        return cls(
            width=settings.canvas_width,
            height=settings.canvas_height,
            schemes=settings.color_schemes,
            scheme_index=settings.color_scheme,
            duration_ms=settings.animation_duration_ms,
            bar_ratio=settings.bar_ratio,
            clock_weight=settings.clock_weight,
            hand_weight=settings.hand_weight,
        )

    @property
    def width(self) -> int:
        return int(self.size.x)

    @property
    def height(self) -> int:
        return int(self.size.y)

    def resize(self, width: int, height: int) -> None:
        """Recompute the layout for a new canvas size."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.size = Vector2(width, height)
        self.shape = compute_shape(self.size, self.bar_ratio)
        logger.debug(f"Canvas resized to {width}x{height}, clock diameter {self.shape.diameter:.1f}")

    def next_scheme(self) -> ColorScheme:
        return self.palette.advance()

    def update(self, delta_ms: float, now: datetime) -> None:
        """
        Run one frame of state changes.

        Args:
            delta_ms: Milliseconds since the previous frame
            now: Current wall-clock time
        """
        self.watcher.sample(now)
        self.grid.advance(delta_ms)

    def draw(self, surface: Surface, now: datetime) -> None:
        """Draw background, clocks and the seconds bar."""
        scheme = self.palette.current

        surface.clear(scheme.background)
        self.grid.render(surface, scheme, self.shape, self.clock_weight, self.hand_weight)

        elapsed_ms = now.second * 1000 + now.microsecond // 1000
        rate = elapsed_ms / MS_PER_MINUTE

        surface.no_stroke()
        surface.fill(scheme.accent)
        surface.rect(
            0,
            self.size.y - self.shape.bar_height,
            rate * self.size.x,
            self.shape.bar_height,
        )

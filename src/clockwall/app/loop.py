"""Frame driver."""

import signal
import threading
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from clockwall.app.state import ClockwallApp
from clockwall.clock.exceptions import ClockwallError
from clockwall.logging.config import get_logger
from clockwall.render.svg import SvgSurface

logger = get_logger(__name__)


class FrameLoop:
    """
    Drives a ClockwallApp at a fixed frame rate and writes each frame as SVG.

    Elapsed time is measured, not assumed, so a slow frame only makes the
    next animation step bigger.
    """

    def __init__(
        self,
        app: ClockwallApp,
        output_path: Optional[Path] = None,
        frame_rate: float = 60.0,
        clock: Callable[[], datetime] = datetime.now,
        monotonic: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize frame loop.

        Args:
            app: Application state to update and draw
            output_path: File that receives every frame, or None to keep frames in memory
            frame_rate: Target frames per second
            clock: Wall-clock source
            monotonic: Monotonic seconds source used for frame timing
            sleep: Sleep function
        """
        if frame_rate <= 0:
            raise ValueError(f"Frame rate must be positive, got {frame_rate}")
        self.app = app
        self.output_path = output_path
        self.frame_interval = 1.0 / frame_rate
        self._clock = clock
        self._monotonic = monotonic
        self._sleep = sleep

    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Render frames until interrupted or ``max_frames`` is reached.

        Returns:
            Number of frames rendered
        """
        logger.info(f"Frame loop started at {1 / self.frame_interval:.0f} fps, outputting to {self.output_path}")
        previous_handler = self._install_palette_signal()

        frames = 0
        last = self._monotonic()
        try:
            while max_frames is None or frames < max_frames:
                started = self._monotonic()
                delta_ms = (started - last) * 1000
                last = started

                self.tick(delta_ms)
                frames += 1

                if max_frames is not None and frames >= max_frames:
                    break
                remaining = self.frame_interval - (self._monotonic() - started)
                if remaining > 0:
                    self._sleep(remaining)
        except KeyboardInterrupt:
            logger.info("Frame loop stopped")
        except ClockwallError as e:
            logger.error(f"Frame {frames} failed: {e}")
            raise
        finally:
            self._restore_palette_signal(previous_handler)

        logger.info(f"Rendered {frames} frames")
        return frames

    def tick(self, delta_ms: float) -> str:
        """Update, draw and write one frame. Returns the SVG document."""
        now = self._clock()
        self.app.update(delta_ms, now)

        surface = SvgSurface(self.app.width, self.app.height)
        self.app.draw(surface, now)
        svg = surface.to_svg()

        if self.output_path is not None:
            self.write_frame(svg)
        return svg

    def write_frame(self, svg: str) -> None:
        """Atomically replace the output file with ``svg``."""
        temp_path = self.output_path.with_suffix(".tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(svg)
            temp_path.replace(self.output_path)
        except OSError as e:
            # The next frame rewrites the whole file
            temp_path.unlink(missing_ok=True)
            logger.error(f"Failed to write frame to {self.output_path}: {e}")

    def _install_palette_signal(self):
        if not hasattr(signal, "SIGUSR1") or threading.current_thread() is not threading.main_thread():
            return None
        return signal.signal(signal.SIGUSR1, lambda signum, frame: self.app.next_scheme())

    def _restore_palette_signal(self, previous_handler) -> None:
        if previous_handler is not None:
            signal.signal(signal.SIGUSR1, previous_handler)

"""Application state and frame driver for Clockwall."""

from clockwall.app.loop import FrameLoop
from clockwall.app.state import ClockwallApp

__all__ = ["ClockwallApp", "FrameLoop"]

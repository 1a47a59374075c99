"""Geometry primitives for Clockwall."""

from clockwall.geometry.vector import Vector2

__all__ = ["Vector2"]

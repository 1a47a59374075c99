"""Rendering backends for Clockwall."""

from clockwall.render.palette import ColorScheme, Palette, default_schemes
from clockwall.render.surface import Surface
from clockwall.render.svg import SvgSurface

__all__ = ["ColorScheme", "Palette", "Surface", "SvgSurface", "default_schemes"]

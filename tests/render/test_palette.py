"""Tests for colour schemes."""

import pytest
from pydantic import ValidationError

from clockwall.render import ColorScheme, Palette, default_schemes


def test_default_schemes_are_inverse() -> None:
    light, dark = default_schemes()
    assert light.background == dark.accent == "#FFFFFF"
    assert light.accent == dark.background == "#000000"


def test_advance_wraps_around() -> None:
    palette = Palette(default_schemes(), index=1)

    assert palette.advance() == palette.schemes[0]
    assert palette.index == 0
    assert palette.advance() == palette.schemes[1]
    assert palette.index == 1


def test_single_scheme_palette_stays_put() -> None:
    scheme = ColorScheme(background="#101010", accent="#EFEFEF")
    palette = Palette([scheme])

    assert palette.advance() is scheme


def test_invalid_palettes() -> None:
    with pytest.raises(ValueError):
        Palette([])
    with pytest.raises(ValueError):
        Palette(default_schemes(), index=2)


@pytest.mark.parametrize("color", ["white", "#FFF", "#GGGGGG", "000000"])
def test_scheme_requires_hex_colours(color) -> None:
    with pytest.raises(ValidationError):
        ColorScheme(background=color, accent="#000000")

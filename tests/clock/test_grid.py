"""Tests for the clock grid orchestration."""

from unittest.mock import MagicMock

import pytest

from clockwall.clock import ClockGrid, MalformedTimeError, encode
from clockwall.clock.layout import ClockShape
from clockwall.geometry import Vector2
from clockwall.render import ColorScheme

SENTINEL = Vector2(999, 999)


def _expected_angles(time_str):
    """Map (column, row) to the angles each digit assigns."""
    expected = {}
    for n, digit in enumerate(time_str):
        for i, angles in enumerate(encode(digit)):
            column = n * 2 + i % 2
            row = i // 2
            expected[(column, row)] = angles
    return expected


def test_grid_has_24_clocks_with_fixed_indices(grid) -> None:
    clocks = list(grid)
    assert len(clocks) == len(grid) == 24
    for column in range(8):
        for row in range(3):
            assert grid.clock_at(column, row).index == Vector2(column, row)


def test_digit_clocks_routing(grid) -> None:
    third = grid.digit_clocks(3)
    assert [(c.index.x, c.index.y) for c in third] == [
        (4, 0), (5, 0),
        (4, 1), (5, 1),
        (4, 2), (5, 2),
    ]


@pytest.mark.parametrize("n", [0, 5, -1])
def test_digit_position_out_of_range(grid, n) -> None:
    with pytest.raises(ValueError):
        grid.digit_clocks(n)


def test_set_time_fills_every_clock(grid) -> None:
    for clock in grid:
        clock.snap_to(SENTINEL)

    grid.set_time("0132")

    assert all(clock.angles != SENTINEL for clock in grid)
    for (column, row), angles in _expected_angles("0132").items():
        clock = grid.clock_at(column, row)
        assert clock.angles == clock.target_angles == clock.start_angles == angles
        assert clock.elapsed_ms == 0


def test_set_time_is_idempotent(grid) -> None:
    grid.set_time("0947")
    once = [(c.angles, c.start_angles, c.target_angles, c.elapsed_ms) for c in grid]

    grid.set_time("0947")

    assert [(c.angles, c.start_angles, c.target_angles, c.elapsed_ms) for c in grid] == once
    assert not grid.is_animating


def test_animate_time_retargets_all_clocks(grid) -> None:
    grid.set_time("1129")

    grid.animate_time("1130")

    for (column, row), angles in _expected_angles("1130").items():
        clock = grid.clock_at(column, row)
        assert clock.target_angles == angles
        assert clock.elapsed_ms == 0
    assert grid.is_animating


def test_animate_time_completes_after_duration(grid) -> None:
    grid.set_time("1129")
    hour_clocks = grid.digit_clocks(1) + grid.digit_clocks(2)
    hours_before = [c.angles for c in hour_clocks]

    grid.animate_time("1130")
    for _ in range(10):
        grid.advance(250)

    assert [c.angles for c in hour_clocks] == hours_before
    for (column, row), angles in _expected_angles("1130").items():
        assert grid.clock_at(column, row).angles == angles
    assert not grid.is_animating


def test_unchanged_digits_do_not_move_mid_animation(grid) -> None:
    grid.set_time("1129")
    before = [c.angles for c in grid.digit_clocks(1)]

    grid.animate_time("1130")
    grid.advance(1000)

    assert [c.angles for c in grid.digit_clocks(1)] == before


@pytest.mark.parametrize("bad", ["113", "11300", "11:3", "ab12", "", "１１３０", None, 1130])
def test_malformed_time_rejected(grid, bad) -> None:
    grid.set_time("0000")
    snapshot = [c.angles for c in grid]

    with pytest.raises(MalformedTimeError):
        grid.set_time(bad)
    with pytest.raises(MalformedTimeError):
        grid.animate_time(bad)

    # Nothing was partially applied
    assert [c.angles for c in grid] == snapshot
    assert not grid.is_animating


def test_render_draws_every_clock(grid) -> None:
    grid.set_time("1200")
    surface = MagicMock()
    shape = ClockShape(offset=Vector2(0, 0), diameter=10, bar_height=1)

    grid.render(surface, ColorScheme(background="#FFFFFF", accent="#000000"), shape)

    assert surface.circle.call_count == 24
    assert surface.line.call_count == 48

"""Tests for application state."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from clockwall.app import ClockwallApp
from clockwall.clock import WatcherState, encode
from clockwall.geometry import Vector2


@pytest.fixture
def clock_app():
    return ClockwallApp(width=800, height=300)


def test_initial_layout(clock_app) -> None:
    assert clock_app.width == 800
    assert clock_app.height == 300
    assert clock_app.shape.diameter == pytest.approx(93)
    assert clock_app.watcher.state is WatcherState.UNINITIALIZED


def test_default_scheme_matches_settings(clock_app, test_settings) -> None:
    assert clock_app.palette.index == test_settings.color_scheme == 1
    assert clock_app.palette.current.background == "#000000"


def test_from_settings(test_settings) -> None:
    test_settings.animation_duration_ms = 1000
    test_settings.hand_weight = 4

    clock_app = ClockwallApp.from_settings(test_settings)

    assert clock_app.size == Vector2(800, 300)
    assert clock_app.palette.index == 1
    assert clock_app.hand_weight == 4
    assert all(clock.duration_ms == 1000 for clock in clock_app.grid)


def test_first_update_snaps_to_time(clock_app) -> None:
    clock_app.update(16, datetime(2024, 1, 1, 22, 7, 3))

    assert clock_app.watcher.last_time == "1007"
    assert [c.angles for c in clock_app.grid.digit_clocks(4)] == list(encode("7"))
    assert not clock_app.grid.is_animating


def test_update_advances_animation(clock_app) -> None:
    clock_app.update(16, datetime(2024, 1, 1, 10, 59, 59))
    clock_app.update(16, datetime(2024, 1, 1, 11, 0, 0))

    assert clock_app.watcher.last_time == "1100"
    assert clock_app.grid.is_animating
    assert all(clock.elapsed_ms == 16 for clock in clock_app.grid)

    clock_app.update(3000, datetime(2024, 1, 1, 11, 0, 3))

    assert not clock_app.grid.is_animating


def test_draw_order_and_seconds_bar(clock_app) -> None:
    now = datetime(2024, 1, 1, 10, 15, 30, 500000)
    clock_app.update(16, now)
    surface = MagicMock()

    clock_app.draw(surface, now)

    surface.clear.assert_called_once_with("#000000")
    assert surface.mock_calls[0][0] == "clear"
    assert surface.circle.call_count == 24
    assert [c[0] for c in surface.mock_calls[-3:]] == ["no_stroke", "fill", "rect"]
    surface.fill.assert_called_once_with("#FFFFFF")

    x, y, width, height = surface.rect.call_args.args
    assert x == 0
    assert y == pytest.approx(300 - 6)
    assert width == pytest.approx(30500 / 60000 * 800)
    assert height == pytest.approx(6)


def test_next_scheme_changes_draw_colours(clock_app) -> None:
    clock_app.next_scheme()
    surface = MagicMock()

    clock_app.draw(surface, datetime(2024, 1, 1, 10, 15))

    surface.clear.assert_called_once_with("#FFFFFF")
    surface.fill.assert_called_once_with("#000000")


def test_resize_recomputes_shape(clock_app) -> None:
    before = clock_app.shape

    clock_app.resize(1600, 600)

    assert clock_app.shape.diameter == pytest.approx(before.diameter * 2)


@pytest.mark.parametrize("width, height", [(0, 100), (100, -1)])
def test_resize_rejects_empty_canvas(clock_app, width, height) -> None:
    with pytest.raises(ValueError):
        clock_app.resize(width, height)

"""Sanity checks for the package itself."""


def test_imports() -> None:
    """Test that the main package can be imported."""
    import clockwall

    assert clockwall.__version__ == "0.1.0"


def test_public_api() -> None:
    """The core types are reachable from their subpackages."""
    from clockwall.app import ClockwallApp, FrameLoop
    from clockwall.clock import Clock, ClockGrid, TimeWatcher, encode
    from clockwall.geometry import Vector2
    from clockwall.render import Surface, SvgSurface

    assert issubclass(SvgSurface, Surface)
    assert callable(encode)
    assert all(cls is not None for cls in (ClockwallApp, FrameLoop, Clock, ClockGrid, TimeWatcher, Vector2))

import pytest
from unittest.mock import patch

from clockwall.clock import ClockGrid
from clockwall.config.settings import Settings, get_settings


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing all output into a temporary directory."""
    return Settings(
        canvas_width=800,
        canvas_height=300,
        frame_rate=240,
        output_path=tmp_path / "out" / "frame.svg",
        log_file=None,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached settings so env/YAML changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_settings(test_settings):
    """Patch get_settings where the CLI looks it up."""
    with patch("clockwall.cli.get_settings", return_value=test_settings):
        yield test_settings


@pytest.fixture
def grid():
    return ClockGrid()

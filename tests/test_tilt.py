"""
Tests for the tilt influence cell.
"""

import threading

import pytest

from tiltball.core.config_loader import load_config
from tiltball.core.tilt import TiltInput, clamp


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def tilt(config):
    return TiltInput(config)


class TestTiltInput:
    """Test acceleration scaling and clamping."""

    def test_starts_at_zero(self, tilt):
        """No influence before any sample."""
        assert tilt.read() == (0.0, 0.0)

    def test_scales_by_sensitivity(self, tilt):
        """Small accelerations are scaled by the sensitivity."""
        assert tilt.update_from_acceleration(1.0, -2.0)
        x, y = tilt.read()
        assert x == pytest.approx(0.08)
        assert y == pytest.approx(-0.16)

    def test_clamped_to_limit(self, tilt):
        """Large accelerations saturate at +/- limit."""
        tilt.update_from_acceleration(50.0, -50.0)
        assert tilt.read() == (pytest.approx(0.2), pytest.approx(-0.2))

    def test_latest_sample_wins(self, tilt):
        """Only the most recent sample is kept."""
        tilt.update_from_acceleration(1.0, 1.0)
        tilt.update_from_acceleration(-1.0, 0.0)
        x, y = tilt.read()
        assert x == pytest.approx(-0.08)
        assert y == 0.0
        assert tilt.samples == 2

    def test_disabled_drops_samples(self, config):
        """Samples are ignored while sensing is disabled."""
        tilt = TiltInput(config, enabled=False)
        assert not tilt.update_from_acceleration(5.0, 5.0)
        assert tilt.read() == (0.0, 0.0)
        assert tilt.samples == 0

    def test_disable_zeroes_influence(self, tilt):
        """Disabling clears any stored influence."""
        tilt.update_from_acceleration(2.0, 2.0)
        tilt.disable()
        assert tilt.read() == (0.0, 0.0)
        assert not tilt.enabled

    def test_clear_keeps_enabled(self, tilt):
        """clear() zeroes the value but keeps accepting samples."""
        tilt.update_from_acceleration(2.0, 2.0)
        tilt.clear()
        assert tilt.read() == (0.0, 0.0)
        assert tilt.update_from_acceleration(1.0, 0.0)

    def test_concurrent_writers(self, tilt):
        """Samples from several threads always leave a clamped value."""
        def writer(sign):
            for i in range(500):
                tilt.update_from_acceleration(sign * i, -sign * i)

        threads = [threading.Thread(target=writer, args=(s,)) for s in (1, -1, 1, -1)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        x, y = tilt.read()
        assert -tilt.limit <= x <= tilt.limit
        assert -tilt.limit <= y <= tilt.limit
        assert tilt.samples == 2000


class TestClamp:
    """Test the clamp helper."""

    @pytest.mark.parametrize("value, expected", [(-5, -1), (0.5, 0.5), (5, 1)])
    def test_clamp(self, value, expected):
        assert clamp(value, -1, 1) == expected

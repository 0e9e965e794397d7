"""
Tests for the pygame renderer.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest
import numpy as np

pygame = pytest.importorskip("pygame")

from tiltball.core.config_loader import load_config
from tiltball.core.draw_commands import Clear, build_frame
from tiltball.core.render_pygame import PygameRenderer
from tiltball.core.state import GameState


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def renderer(config):
    renderer = PygameRenderer(config)
    yield renderer
    renderer.close()


@pytest.fixture
def frame(config, renderer):
    state = GameState.create(config, seed=0)
    return renderer.render(build_frame(state))


class TestPygameRenderer:
    """Test pixel output of a default frame."""

    def test_shape(self, frame):
        """Image is height x width x RGB."""
        assert frame.shape == (600, 400, 3)

    def test_background(self, frame):
        """Empty areas show the background color."""
        assert tuple(frame[200, 5]) == (20, 20, 20)

    def test_ball_is_green(self, frame):
        """Ball centre is green."""
        assert tuple(frame[300, 200]) == (0, 255, 0)

    def test_paddle_is_red(self, frame):
        """Inside the paddle triangle is red."""
        assert tuple(frame[590, 200]) == (255, 0, 0)

    def test_basket_is_blue_with_rim(self, frame):
        """Basket fill is blue with a black rim."""
        assert tuple(frame[50, 200]) == (0, 0, 255)
        assert tuple(frame[36, 200]) == (0, 0, 0)

    def test_clear_only(self, renderer):
        """A single clear command fills the canvas."""
        image = renderer.render([Clear((1, 2, 3))])
        assert np.all(image == np.array([1, 2, 3], dtype=np.uint8))

    def test_unknown_command(self, renderer):
        """Unknown commands are rejected."""
        with pytest.raises(ValueError):
            renderer.render([object()])

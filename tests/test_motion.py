"""
Tests for per-frame motion of the basket, paddle and ball.
"""

import pytest

from tiltball.core.config_loader import load_config
from tiltball.core.motion import move_ball, move_basket, move_paddle
from tiltball.core.state import GameState


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def state(config):
    return GameState.create(config, seed=42)


class TestBasketMotion:
    """Test basket sliding and wall bounces."""

    def test_moves_by_velocity(self, state):
        """Basket advances by its velocity each frame."""
        state.basket.x = 200
        state.basket.vx = 1.5
        assert not move_basket(state)
        assert state.basket.x == pytest.approx(201.5)

    def test_left_bound_flips_on_same_frame(self, state):
        """Basket reaching the left bound flips to positive without passing it."""
        state.basket.x = 36
        state.basket.vx = -1.5

        assert move_basket(state)
        assert state.basket.x == 35
        assert state.basket.vx == 1.5

    def test_right_bound_flips_on_same_frame(self, state):
        """Basket reaching the right bound flips to negative without passing it."""
        state.basket.x = 364
        state.basket.vx = 1.5

        assert move_basket(state)
        assert state.basket.x == 365
        assert state.basket.vx == -1.5

    def test_no_oscillation_after_bounce(self, state):
        """The frame after a bounce moves the basket away without flipping again."""
        state.basket.x = 36
        state.basket.vx = -1.5
        move_basket(state)

        assert not move_basket(state)
        assert state.basket.x == pytest.approx(36.5)
        assert state.basket.vx == 1.5

    def test_stays_within_bounds(self, state, config):
        """Basket never leaves its range over many frames."""
        lo, hi = config.basket_x_range
        flips = 0
        bounces = 0
        previous_sign = state.basket.vx > 0

        for _ in range(2000):
            if move_basket(state):
                bounces += 1
            assert lo <= state.basket.x <= hi
            sign = state.basket.vx > 0
            if sign != previous_sign:
                flips += 1
            previous_sign = sign

        assert bounces > 0
        assert flips == bounces


class TestPaddleMotion:
    """Test paddle clamping."""

    def test_follows_pointer(self, state):
        """Paddle centre goes straight to the pointer."""
        move_paddle(state, 123)
        assert state.paddle.x == 123

    @pytest.mark.parametrize("pointer_x, expected", [
        (-100, 50),
        (0, 50),
        (49.9, 50),
        (350.1, 350),
        (1000, 350),
    ])
    def test_clamped_to_screen(self, state, pointer_x, expected):
        """Pointer outside the playable range keeps the paddle fully on screen."""
        move_paddle(state, pointer_x)
        assert state.paddle.x == expected

    def test_none_pointer_keeps_position(self, state):
        """No pointer sample leaves the paddle where it is."""
        state.paddle.x = 80
        move_paddle(state, None)
        assert state.paddle.x == 80


class TestBallMotion:
    """Test ball movement, tilt and wall bounces."""

    def _place(self, state, x, y, vx, vy, airborne=False):
        state.ball.x = x
        state.ball.y = y
        state.ball.vx = vx
        state.ball.vy = vy
        state.ball.airborne = airborne

    def test_moves_by_velocity(self, state):
        """Ball advances by its velocity at multiplier 1."""
        self._place(state, 200, 300, 4, 4)
        assert not move_ball(state)
        assert (state.ball.x, state.ball.y) == (204, 304)

    def test_speed_multiplier_scales_step(self, state):
        """Position step is velocity times the speed multiplier."""
        self._place(state, 200, 300, 4, -4)
        state.speed_multiplier = 1.5
        move_ball(state)
        assert state.ball.x == pytest.approx(206)
        assert state.ball.y == pytest.approx(294)

    def test_tilt_ignored_on_ground(self, state):
        """Tilt does not affect a ball that has not bounced yet."""
        self._place(state, 200, 300, 4, 4)
        move_ball(state, (0.2, 0.2))
        assert (state.ball.vx, state.ball.vy) == (4, 4)

    def test_tilt_applied_when_airborne(self, state):
        """Tilt is added to an airborne ball's velocity."""
        self._place(state, 200, 300, 4, -4, airborne=True)
        move_ball(state, (0.2, -0.1))
        assert state.ball.vx == pytest.approx(4.2)
        assert state.ball.vy == pytest.approx(-4.1)

    def test_velocity_capped(self, state):
        """Airborne velocity is clamped to max_speed times multiplier."""
        self._place(state, 200, 300, 9.9, -9.95, airborne=True)
        move_ball(state, (0.2, -0.2))
        assert state.ball.vx == pytest.approx(10)
        assert state.ball.vy == pytest.approx(-10)

    def test_cap_scales_with_multiplier(self, state):
        """A faster game allows a faster ball."""
        self._place(state, 200, 300, 10, -4, airborne=True)
        state.speed_multiplier = 1.1
        move_ball(state, (0.2, 0.0))
        assert state.ball.vx == pytest.approx(10.2)

    def test_cap_holds_over_many_frames(self, state):
        """|v| stays within the cap after every update while airborne."""
        self._place(state, 200, 300, 4, -4, airborne=True)
        state.speed_multiplier = 1.2
        for i in range(300):
            tilt = (0.2, -0.2) if i % 50 < 25 else (-0.2, 0.2)
            move_ball(state, tilt)
            cap = state.velocity_cap
            assert abs(state.ball.vx) <= cap + 1e-9
            assert abs(state.ball.vy) <= cap + 1e-9

    def test_left_wall_bounce(self, state):
        """Ball crossing the left wall heads right."""
        self._place(state, 12, 300, -4, 4)
        move_ball(state)
        assert state.ball.vx == 4

    def test_right_wall_bounce(self, state):
        """Ball crossing the right wall heads left."""
        self._place(state, 388, 300, 4, 4)
        move_ball(state)
        assert state.ball.vx == -4

    def test_top_wall_bounce(self, state):
        """Ball crossing the top wall heads down."""
        self._place(state, 200, 12, 4, -4)
        assert not move_ball(state)
        assert state.ball.vy == 4

    def test_miss_past_bottom(self, state):
        """Ball past the bottom edge reports a miss."""
        self._place(state, 200, 598, 4, 4)
        assert move_ball(state)

    def test_bottom_edge_itself_is_not_a_miss(self, state):
        """Ball centre exactly on the bottom edge is still in play."""
        self._place(state, 200, 596, 0, 4)
        assert not move_ball(state)
        assert state.ball.y == 600

"""
Collision System
================

Axis-aligned overlap checks between the ball and the paddle or basket,
and the bounce, score and speed effects they trigger.

Checks are discrete per frame; a very fast ball can tunnel through a thin
band between two frames.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from tiltball.core.config_loader import GameConfig, get_config
from tiltball.core.scoring import ScoreEvent, ScoreTracker
from tiltball.core.state import GameState


@dataclass
class CollisionResult:
    """Outcome of the collision checks for one frame."""
    paddle_hit: bool = False
    basket_hit: bool = False
    events: List[ScoreEvent] = field(default_factory=list)

    @property
    def points(self) -> int:
        """Points awarded this frame."""
        return sum(e.points for e in self.events)


class CollisionSystem:
    """
    Runs the paddle and basket checks against a GameState.

    The two checks are independent; both may fire in the same frame.
    """

    def __init__(self, scorer: ScoreTracker, config: Optional[GameConfig] = None):
        """
        Initialize collision system.

        Args:
            scorer: Score tracker that receives hit events.
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._scorer = scorer

    def ball_on_paddle(self, state: GameState) -> bool:
        """
        True if the descending ball overlaps the paddle's bounding box.

        The vertical band runs from the paddle apex down to the bottom edge;
        the ball counts while its lower edge is past the apex and its centre
        has not left the board. Only a descending ball is deflected.
        """
        ball = state.ball
        paddle = state.paddle
        paddle_top = self._config.paddle_top_y

        in_band = ball.bottom > paddle_top and ball.y <= self._config.board.height
        in_span = paddle.left < ball.x < paddle.right
        return in_band and in_span and ball.vy > 0

    def ball_in_basket(self, state: GameState) -> bool:
        """True if the ball's upper edge lies inside the basket box."""
        ball = state.ball
        basket = state.basket
        in_span = basket.left < ball.x < basket.right
        in_band = basket.top < ball.top < basket.bottom
        return in_span and in_band

    def check_paddle(self, state: GameState) -> Optional[ScoreEvent]:
        """
        Bounce the ball off the paddle if they overlap.

        On a hit the ball heads up, becomes airborne, the speed multiplier
        grows by one increment and the paddle points are awarded.

        Returns:
            ScoreEvent if the paddle was hit, None otherwise.
        """
        if not self.ball_on_paddle(state):
            return None

        state.ball.vy = -state.ball.vy
        state.ball.airborne = True
        state.speed_multiplier += self._config.scoring.speed_increment
        return self._scorer.apply_paddle_hit(state)

    def check_basket(self, state: GameState) -> Optional[ScoreEvent]:
        """
        Award the basket bonus and invert vertical velocity when the ball
        enters the basket box.

        A ball that stays inside the box across frames counts once; it has to
        leave the box before it can score again.

        Returns:
            ScoreEvent if the basket was hit, None otherwise.
        """
        overlapping = self.ball_in_basket(state)
        entered = overlapping and not state.ball.in_basket
        state.ball.in_basket = overlapping
        if not entered:
            return None

        event = self._scorer.apply_basket_hit(state)
        state.ball.vy = -state.ball.vy
        state.ball.airborne = True
        return event

    def resolve(self, state: GameState) -> CollisionResult:
        """
        Run both checks for this frame.

        Args:
            state: Game state to update.

        Returns:
            CollisionResult describing which checks fired.
        """
        events: List[ScoreEvent] = []

        paddle_event = self.check_paddle(state)
        if paddle_event is not None:
            events.append(paddle_event)

        basket_event = self.check_basket(state)
        if basket_event is not None:
            events.append(basket_event)

        return CollisionResult(
            paddle_hit=paddle_event is not None,
            basket_hit=basket_event is not None,
            events=events
        )

"""
Game State
==========

Mutable entity attributes shared by the per-frame update steps.

A single GameState instance is passed explicitly to every step function;
nothing lives in module globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from tiltball.core.config_loader import GameConfig, get_config
from tiltball.core.rng import ServeRng


@dataclass
class Ball:
    """The bouncing ball."""
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    airborne: bool = False  # Set after the first paddle or basket bounce
    in_basket: bool = False  # Overlapped the basket on the previous check

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius


@dataclass
class Paddle:
    """Triangle paddle; only x moves, the base sits on the bottom edge."""
    x: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2


@dataclass
class Basket:
    """Bonus target sliding between the side walls."""
    x: float
    y: float
    vx: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2


@dataclass
class GameState:
    """
    All mutable game attributes.

    The frame update, collision and lifecycle steps mutate fields directly;
    reset() and reset_ball() are the only bulk mutators.
    """
    config: GameConfig
    ball: Ball
    paddle: Paddle
    basket: Basket
    rng: ServeRng = field(default_factory=ServeRng)
    score: int = 0
    lives: int = 3
    speed_multiplier: float = 1.0
    frame: int = 0

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ) -> "GameState":
        """
        Build a state with all entities at their start positions.

        Args:
            config: Game configuration. Uses default if None.
            seed: Seed for the serve direction.

        Returns:
            A freshly reset GameState.
        """
        if config is None:
            config = get_config()

        board = config.board
        state = cls(
            config=config,
            ball=Ball(
                x=board.width / 2,
                y=board.height / 2,
                vx=config.ball.serve_speed,
                vy=config.ball.serve_speed,
                radius=config.ball.radius
            ),
            paddle=Paddle(
                x=board.width / 2,
                width=config.paddle.width,
                height=config.paddle.height
            ),
            basket=Basket(
                x=board.width / 2,
                y=config.basket.y,
                vx=config.basket.speed,
                width=config.basket.width,
                height=config.basket.height
            ),
            rng=ServeRng(seed)
        )
        state.reset()
        return state

    def reset(self) -> None:
        """Full reset: score, lives, paddle, basket and ball."""
        board = self.config.board
        self.score = 0
        self.lives = self.config.lives.initial
        self.frame = 0
        self.paddle.x = board.width / 2
        self.basket.x = board.width / 2
        self.basket.vx = self.config.basket.speed
        self.reset_ball()

    def reset_ball(self) -> None:
        """Serve a new ball from the centre at base speed."""
        board = self.config.board
        serve = self.config.ball.serve_speed
        self.ball.x = board.width / 2
        self.ball.y = board.height / 2
        self.ball.vx = self.rng.pick_direction(serve)
        self.ball.vy = serve
        self.ball.airborne = False
        self.ball.in_basket = False
        self.speed_multiplier = 1.0

    @property
    def velocity_cap(self) -> float:
        """Per-axis velocity limit for an airborne ball."""
        return self.config.ball.max_speed * self.speed_multiplier

    def to_dict(self) -> Dict[str, Any]:
        """Flat view of the state for info dicts and renderers."""
        return {
            "ball_x": self.ball.x,
            "ball_y": self.ball.y,
            "ball_vx": self.ball.vx,
            "ball_vy": self.ball.vy,
            "ball_radius": self.ball.radius,
            "airborne": self.ball.airborne,
            "paddle_x": self.paddle.x,
            "basket_x": self.basket.x,
            "basket_y": self.basket.y,
            "basket_vx": self.basket.vx,
            "score": self.score,
            "lives": self.lives,
            "speed_multiplier": self.speed_multiplier,
            "frame": self.frame,
        }

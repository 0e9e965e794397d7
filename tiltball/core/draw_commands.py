"""
Draw Commands
=============

Primitive draw instructions describing one frame.

The game core never touches a drawing API; it produces a list of these
primitives and a renderer executes them in order. Text is centred on its
(x, y) anchor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from tiltball.core.config_loader import GameConfig
from tiltball.core.state import GameState

Color = Tuple[int, int, int]
Point = Tuple[float, float]

PERMISSION_PROMPT = 'Tap "Allow Sensor Access" to Start'
GAME_OVER_TEXT = "GAME OVER"
RESTART_PROMPT = "Click to Restart"


@dataclass(frozen=True)
class Clear:
    """Fill the whole canvas."""
    color: Color


@dataclass(frozen=True)
class Circle:
    """Filled circle."""
    x: float
    y: float
    radius: float
    color: Color


@dataclass(frozen=True)
class Triangle:
    """Filled triangle."""
    p1: Point
    p2: Point
    p3: Point
    color: Color


@dataclass(frozen=True)
class Rect:
    """Centre-anchored rectangle with optional outline."""
    cx: float
    cy: float
    width: float
    height: float
    fill: Color
    outline: Optional[Color] = None
    outline_width: int = 0


@dataclass(frozen=True)
class Text:
    """Centre-anchored text."""
    text: str
    x: float
    y: float
    size: int
    color: Color


DrawCommand = Union[Clear, Circle, Triangle, Rect, Text]


def paddle_vertices(state: GameState) -> Tuple[Point, Point, Point]:
    """Triangle corners: base on the bottom edge, apex above the centre."""
    height = state.config.board.height
    paddle = state.paddle
    return (
        (paddle.left, height),
        (paddle.right, height),
        (paddle.x, height - paddle.height),
    )


def build_permission_prompt(config: GameConfig) -> List[DrawCommand]:
    """Frame shown while waiting for sensor access."""
    display = config.display
    board = config.board
    return [
        Clear(display.color("background")),
        Text(PERMISSION_PROMPT, board.width / 2, board.height / 2,
             display.font_size, display.color("text")),
    ]


def build_frame(state: GameState, game_over: bool = False) -> List[DrawCommand]:
    """
    Build the draw list for the current state.

    Order: background, basket, ball, paddle, score and lives, then the game
    over overlay when the game has ended.

    Args:
        state: Game state to draw.
        game_over: Whether to append the game over overlay.

    Returns:
        List of draw commands.
    """
    config = state.config
    display = config.display
    board = config.board
    ball = state.ball
    basket = state.basket

    commands: List[DrawCommand] = [
        Clear(display.color("background")),
        Rect(
            cx=basket.x,
            cy=basket.y,
            width=basket.width,
            height=basket.height,
            fill=display.color("basket"),
            outline=display.color("basket_outline"),
            outline_width=display.basket_outline_width
        ),
        Circle(ball.x, ball.y, ball.radius, display.color("ball")),
        Triangle(*paddle_vertices(state), color=display.color("paddle")),
        Text(f"Score: {state.score}", 50, 20, display.font_size, display.color("text")),
        Text(f"Lives: {state.lives}", board.width - 50, 20,
             display.font_size, display.color("text")),
    ]

    if game_over:
        cx = board.width / 2
        cy = board.height / 2
        color = display.color("game_over")
        commands.extend([
            Text(GAME_OVER_TEXT, cx, cy, display.font_size_large, color),
            Text(f"Final Score: {state.score}", cx, cy + 50, display.font_size, color),
            Text(RESTART_PROMPT, cx, cy + 90, display.font_size, color),
        ])

    return commands

"""
Frame Motion
============

Per-frame movement of the basket, paddle and ball.

Each function mutates the GameState it is given and is called once per
Playing frame, in order: basket, paddle, ball.
"""

from __future__ import annotations

from typing import Optional, Tuple

from tiltball.core.state import GameState
from tiltball.core.tilt import clamp


def move_basket(state: GameState) -> bool:
    """
    Slide the basket and bounce it off the side walls.

    The basket is pinned to the bound it reaches, so it never leaves
    [width/2 + margin, board_width - width/2 - margin], and its velocity is
    pointed back inward on that same frame.

    Args:
        state: Game state to update.

    Returns:
        True if the basket bounced this frame.
    """
    basket = state.basket
    lo, hi = state.config.basket_x_range

    basket.x += basket.vx

    if basket.x <= lo:
        basket.x = lo
        basket.vx = abs(basket.vx)
        return True
    if basket.x >= hi:
        basket.x = hi
        basket.vx = -abs(basket.vx)
        return True
    return False


def move_paddle(state: GameState, pointer_x: Optional[float]) -> None:
    """
    Put the paddle under the pointer, clamped to stay fully on screen.

    Args:
        state: Game state to update.
        pointer_x: Pointer x in board coordinates. None leaves the paddle where it is.
    """
    if pointer_x is None:
        return
    lo, hi = state.config.paddle_x_range
    state.paddle.x = clamp(float(pointer_x), lo, hi)


def move_ball(state: GameState, tilt: Tuple[float, float] = (0.0, 0.0)) -> bool:
    """
    Advance the ball one frame.

    Position moves by velocity times the speed multiplier. An airborne ball
    then picks up the tilt influence and has each velocity component capped
    at max_speed times the multiplier. Side and top walls reflect the ball.

    Args:
        state: Game state to update.
        tilt: Current (x, y) tilt influence.

    Returns:
        True if the ball fell past the bottom edge (missed the paddle).
    """
    ball = state.ball
    board = state.config.board
    multiplier = state.speed_multiplier

    ball.x += ball.vx * multiplier
    ball.y += ball.vy * multiplier

    if ball.airborne:
        cap = state.velocity_cap
        ball.vx = clamp(ball.vx + tilt[0], -cap, cap)
        ball.vy = clamp(ball.vy + tilt[1], -cap, cap)

    # Reflect toward the inside so a ball past the wall cannot flip back out
    if ball.x < ball.radius:
        ball.vx = abs(ball.vx)
    elif ball.x > board.width - ball.radius:
        ball.vx = -abs(ball.vx)

    if ball.y < ball.radius:
        ball.vy = abs(ball.vy)
    elif ball.y > board.height:
        return True

    return False

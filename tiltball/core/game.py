"""
Core Game
=========

Main game orchestrator combining motion, collisions, scoring and lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tiltball.core.collision import CollisionSystem
from tiltball.core.config_loader import GameConfig, get_config
from tiltball.core.draw_commands import DrawCommand, build_frame, build_permission_prompt
from tiltball.core.lifecycle import LifecycleController, Phase
from tiltball.core.motion import move_ball, move_basket, move_paddle
from tiltball.core.scoring import ScoreEvent, ScoreTracker
from tiltball.core.state import GameState
from tiltball.core.tilt import TiltInput


@dataclass
class FrameResult:
    """Result of a single frame tick."""
    ran: bool
    delta_score: int = 0
    basket_bounced: bool = False
    paddle_hit: bool = False
    basket_hit: bool = False
    life_lost: bool = False
    game_over: bool = False
    events: List[ScoreEvent] = field(default_factory=list)


class CoreGame:
    """
    Main game simulation class.

    Owns the GameState and the lifecycle phase, and runs one frame per
    tick() in a fixed order:
    - Basket motion
    - Paddle motion (from the pointer)
    - Ball motion (with tilt influence once airborne)
    - Paddle and basket collision checks

    Ticks are no-ops while GameOver or while waiting for sensor permission.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        require_permission: bool = False,
        debug: bool = False
    ):
        """
        Initialize game.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for the serve direction.
            require_permission: If True, stay idle until grant_permission()
                or deny_permission() is called.
            debug: If True, print [DEBUG] lines for game events.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._debug = debug

        self._state = GameState.create(config, seed=seed)
        self._scorer = ScoreTracker(config)
        self._collisions = CollisionSystem(self._scorer, config)
        self._lifecycle = LifecycleController(self._state)
        self._tilt = TiltInput(config, enabled=not require_permission)
        self._awaiting_permission = require_permission

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def state(self) -> GameState:
        """Mutable game state."""
        return self._state

    @property
    def tilt(self) -> TiltInput:
        """Tilt influence cell."""
        return self._tilt

    @property
    def scorer(self) -> ScoreTracker:
        return self._scorer

    @property
    def phase(self) -> Phase:
        return self._lifecycle.phase

    @property
    def is_over(self) -> bool:
        """True if game has ended."""
        return self._lifecycle.is_over

    @property
    def score(self) -> int:
        """Current score."""
        return self._state.score

    @property
    def lives(self) -> int:
        return self._state.lives

    @property
    def awaiting_permission(self) -> bool:
        """True while the sensor permission gate is closed."""
        return self._awaiting_permission

    def grant_permission(self) -> None:
        """Open the permission gate with tilt sensing enabled."""
        self._awaiting_permission = False
        self._tilt.enable()
        if self._debug:
            print("[DEBUG] Sensor access granted")

    def deny_permission(self) -> None:
        """Open the permission gate with tilt influence held at zero."""
        self._awaiting_permission = False
        self._tilt.disable()
        if self._debug:
            print("[DEBUG] Sensor access denied, playing without tilt")

    def on_device_motion(self, ax: float, ay: float) -> bool:
        """
        Feed a raw acceleration sample from the host.

        Safe to call from another thread.

        Returns:
            True if the sample was accepted.
        """
        return self._tilt.update_from_acceleration(ax, ay)

    def tick(self, pointer_x: Optional[float] = None) -> FrameResult:
        """
        Advance the game by one frame.

        Args:
            pointer_x: Pointer x in board coordinates, or None to keep the paddle still.

        Returns:
            FrameResult describing what happened. ran is False when the
            frame was skipped (game over or waiting for permission).
        """
        if self._awaiting_permission or not self._lifecycle.is_playing:
            return FrameResult(ran=False, game_over=self.is_over)

        state = self._state
        score_before = state.score
        state.frame += 1

        basket_bounced = move_basket(state)
        move_paddle(state, pointer_x)
        missed = move_ball(state, self._tilt.read())

        life_lost = False
        if missed:
            life_lost = True
            loss = self._lifecycle.lose_life()
            if self._debug:
                print(f"[DEBUG] Missed ball, lives left: {loss.lives_left}")
            if loss.game_over:
                if self._debug:
                    print(f"[DEBUG] GAME OVER - Final score: {state.score}")
                return FrameResult(
                    ran=True,
                    basket_bounced=basket_bounced,
                    life_lost=True,
                    game_over=True
                )

        collisions = self._collisions.resolve(state)
        if self._debug:
            for event in collisions.events:
                print(f"[DEBUG] {event!r} multiplier={state.speed_multiplier:.2f}")

        return FrameResult(
            ran=True,
            delta_score=state.score - score_before,
            basket_bounced=basket_bounced,
            paddle_hit=collisions.paddle_hit,
            basket_hit=collisions.basket_hit,
            life_lost=life_lost,
            game_over=False,
            events=collisions.events
        )

    def restart(self) -> bool:
        """
        Handle the restart trigger.

        Only acts while GameOver.

        Returns:
            True if a new game was started.
        """
        restarted = self._lifecycle.restart()
        if restarted:
            self._scorer.reset()
            if self._debug:
                print("[DEBUG] Game restarted")
        return restarted

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset to a fresh game regardless of phase.

        Args:
            seed: New serve seed. Continues the current serve sequence if None.
        """
        self._state.rng.reset(seed)
        self._lifecycle.reset()
        self._scorer.reset()

    def draw_commands(self) -> List[DrawCommand]:
        """Draw instructions for the current frame."""
        if self._awaiting_permission:
            return build_permission_prompt(self._config)
        return build_frame(self._state, game_over=self.is_over)

    def get_info(self) -> Dict[str, Any]:
        """Get additional info dict for Gymnasium."""
        return {
            "score": self._state.score,
            "lives": self._state.lives,
            "phase": self.phase.value,
            "frame": self._state.frame,
            "speed_multiplier": self._state.speed_multiplier,
            "paddle_hits": self._scorer.paddle_hits,
            "basket_hits": self._scorer.basket_hits,
        }

    def get_render_data(self) -> Dict[str, Any]:
        """
        Get data needed for rendering or inspection.

        Returns:
            Dict with entity positions, board info and phase.
        """
        data = self._state.to_dict()
        data.update({
            "board_width": self._config.board.width,
            "board_height": self._config.board.height,
            "phase": self.phase.value,
            "awaiting_permission": self._awaiting_permission,
            "tilt": self._tilt.read(),
        })
        return data

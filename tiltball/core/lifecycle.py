"""
Game Lifecycle
==============

Lives tracking and the Playing / GameOver state machine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tiltball.core.state import GameState


class Phase(Enum):
    """Two-state game lifecycle."""
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class LifeLossResult:
    """Result of losing a life."""
    lives_left: int
    game_over: bool


class LifecycleController:
    """
    Owns the game phase.

    - Playing -> GameOver when the last life is lost.
    - GameOver -> Playing on an explicit restart, which resets the whole state.

    While GameOver, only restart() has any effect.
    """

    def __init__(self, state: GameState):
        """
        Initialize the controller in the Playing phase.

        Args:
            state: The game state this controller resets.
        """
        self._state = state
        self._phase = Phase.PLAYING

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_playing(self) -> bool:
        return self._phase is Phase.PLAYING

    @property
    def is_over(self) -> bool:
        return self._phase is Phase.GAME_OVER

    def lose_life(self) -> LifeLossResult:
        """
        Handle a missed ball.

        Decrements lives (never below zero). At zero lives the phase becomes
        GameOver and the ball is left where it fell; otherwise a new ball is
        served and the speed multiplier drops back to 1.0.
        After the final life the multiplier keeps its in-play value until
        restart() resets the game.

        Returns:
            LifeLossResult with remaining lives and whether the game ended.
        """
        state = self._state
        if self.is_over:
            return LifeLossResult(lives_left=state.lives, game_over=True)

        state.lives = max(0, state.lives - 1)

        if state.lives == 0:
            self._phase = Phase.GAME_OVER
            return LifeLossResult(lives_left=0, game_over=True)

        state.reset_ball()
        return LifeLossResult(lives_left=state.lives, game_over=False)

    def restart(self) -> bool:
        """
        Restart after game over.

        Returns:
            True if the game was restarted, False if it was still playing.
        """
        if not self.is_over:
            return False

        self._state.reset()
        self._phase = Phase.PLAYING
        return True

    def reset(self) -> None:
        """Unconditional reset to a fresh Playing game."""
        self._state.reset()
        self._phase = Phase.PLAYING

"""
Scoring System
==============

Applies paddle and basket hit scores based on game configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tiltball.core.config_loader import GameConfig, get_config
from tiltball.core.state import GameState


PADDLE_HIT = "paddle"
BASKET_HIT = "basket"


@dataclass
class ScoreEvent:
    """Record of a scoring event."""
    points: int
    kind: str
    total: int

    def __repr__(self) -> str:
        return f"ScoreEvent({self.kind}=+{self.points}, total={self.total})"


class ScoreTracker:
    """
    Adds hit points to the game state and counts hits.

    The running score lives on GameState; it only ever increases while
    playing and returns to zero on a full state reset.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize score tracker.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._paddle_hits: int = 0
        self._basket_hits: int = 0

    @property
    def paddle_hits(self) -> int:
        """Paddle hits since the last reset."""
        return self._paddle_hits

    @property
    def basket_hits(self) -> int:
        """Basket hits since the last reset."""
        return self._basket_hits

    def apply_paddle_hit(self, state: GameState) -> ScoreEvent:
        """Award points for a paddle bounce."""
        points = self._config.scoring.paddle_points
        state.score += points
        self._paddle_hits += 1
        return ScoreEvent(points=points, kind=PADDLE_HIT, total=state.score)

    def apply_basket_hit(self, state: GameState) -> ScoreEvent:
        """Award bonus points for hitting the basket."""
        points = self._config.scoring.basket_points
        state.score += points
        self._basket_hits += 1
        return ScoreEvent(points=points, kind=BASKET_HIT, total=state.score)

    def reset(self) -> None:
        """Reset hit counters."""
        self._paddle_hits = 0
        self._basket_hits = 0

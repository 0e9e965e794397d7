"""
Tilt Input
==========

Latest-value cell for accelerometer influence on the ball.

Device-motion samples arrive independently of the frame loop (possibly on
another thread). The frame update only ever reads the most recent value;
there is no queue and reads never wait for a new sample.
"""

from __future__ import annotations

import threading
from typing import Optional, Tuple

from tiltball.core.config_loader import GameConfig, get_config


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


class TiltInput:
    """
    Thread-safe holder for the current tilt influence (x, y).

    While disabled, samples are dropped and the influence reads as zero,
    which keeps the game fully playable without a sensor.
    """

    def __init__(self, config: Optional[GameConfig] = None, enabled: bool = True):
        """
        Initialize tilt input.

        Args:
            config: Game configuration. Uses default if None.
            enabled: Whether samples are accepted from the start.
        """
        if config is None:
            config = get_config()

        self._sensitivity = config.tilt.sensitivity
        self._limit = config.tilt.limit
        self._lock = threading.Lock()
        self._x = 0.0
        self._y = 0.0
        self._enabled = enabled
        self._samples = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def limit(self) -> float:
        return self._limit

    @property
    def samples(self) -> int:
        """Number of accepted samples since creation."""
        return self._samples

    def enable(self) -> None:
        """Start accepting samples."""
        with self._lock:
            self._enabled = True

    def disable(self) -> None:
        """Stop accepting samples and zero the influence."""
        with self._lock:
            self._enabled = False
            self._x = 0.0
            self._y = 0.0

    def update_from_acceleration(self, ax: float, ay: float) -> bool:
        """
        Store a new raw acceleration sample.

        Args:
            ax: Device acceleration along x.
            ay: Device acceleration along y.

        Returns:
            True if the sample was accepted.
        """
        with self._lock:
            if not self._enabled:
                return False
            self._x = clamp(ax * self._sensitivity, -self._limit, self._limit)
            self._y = clamp(ay * self._sensitivity, -self._limit, self._limit)
            self._samples += 1
            return True

    def read(self) -> Tuple[float, float]:
        """Most recent (x, y) influence."""
        with self._lock:
            return (self._x, self._y)

    def clear(self) -> None:
        """Zero the influence without changing the enabled flag."""
        with self._lock:
            self._x = 0.0
            self._y = 0.0

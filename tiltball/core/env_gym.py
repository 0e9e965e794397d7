"""
Gymnasium Environment Wrapper
=============================

Provides a standard Gymnasium interface to the tilt ball game.
The agent plays the pointer: each step is one frame.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union
import numpy as np

import gymnasium as gym
from gymnasium import spaces

from tiltball.core.config_loader import GameConfig, load_config
from tiltball.core.game import CoreGame


OBS_FIELDS = (
    "ball_x",
    "ball_y",
    "ball_vx",
    "ball_vy",
    "airborne",
    "paddle_x",
    "basket_x",
    "basket_vx",
    "speed_multiplier",
    "lives",
)


class TiltBallEnv(gym.Env):
    """
    Tilt ball game as a Gymnasium environment.

    Action Space:
        Box(low=-1.0, high=1.0, shape=(), dtype=float32)
        Pointer x from the left edge (-1) to the right edge (+1).

    Observation Space:
        Box of len(OBS_FIELDS) float32 values, in OBS_FIELDS order.

    Reward:
        Score gained this frame.

    Episode ends (terminated) on game over, or is truncated after
    caps.max_frames frames.
    """

    metadata = {
        "render_modes": ["human", "rgb_array"],
        "render_fps": 60,
    }

    def __init__(
        self,
        config_path: Optional[str] = None,
        render_mode: Optional[str] = None,
        debug: bool = False,
    ):
        """
        Initialize environment.

        Args:
            config_path: Path to game_config.yaml. Uses default if None.
            render_mode: "human" for window, "rgb_array" for numpy, None for headless.
            debug: If True, enables verbose debug output.
        """
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode: {render_mode}")

        self._config = load_config(config_path)
        self.render_mode = render_mode
        self._debug = debug

        self._game = CoreGame(config=self._config, debug=debug)
        self._frames = 0

        # Initialize renderer (lazy)
        self._renderer = None

        self.action_space = spaces.Box(low=-1.0, high=1.0, shape=(), dtype=np.float32)
        self.observation_space = self._build_observation_space()

        if self._debug:
            print(f"[DEBUG] TiltBallEnv initialized")
            print(f"[DEBUG]   Board: {self._config.board.width}x{self._config.board.height}")
            print(f"[DEBUG]   Max frames: {self._config.caps.max_frames}")

    def _build_observation_space(self) -> spaces.Box:
        """Build the observation space definition."""
        board = self._config.board
        cap = self._config.ball.max_speed * 100
        low = np.array(
            [-np.inf, -np.inf, -cap, -cap, 0, 0, 0, -np.inf, 1.0, 0],
            dtype=np.float32
        )
        high = np.array(
            [np.inf, np.inf, cap, cap, 1, board.width, board.width, np.inf,
             np.inf, self._config.lives.initial],
            dtype=np.float32
        )
        return spaces.Box(low=low, high=high, dtype=np.float32)

    def _get_obs(self) -> np.ndarray:
        data = self._game.state.to_dict()
        return np.array([float(data[name]) for name in OBS_FIELDS], dtype=np.float32)

    def action_to_pointer_x(self, action: float) -> float:
        """Map a normalized action in [-1, 1] to a board x coordinate."""
        action = max(-1.0, min(1.0, action))
        return (action + 1.0) / 2.0 * self._config.board.width

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            (observation, info) tuple.
        """
        super().reset(seed=seed)

        self._game.reset(seed=seed)
        self._frames = 0

        info = self._game.get_info()
        info["delta_score"] = 0
        return self._get_obs(), info

    def step(
        self,
        action: Union[float, np.ndarray]
    ) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Execute one frame.

        Args:
            action: Pointer x in [-1, 1].

        Returns:
            (observation, reward, terminated, truncated, info) tuple.
        """
        if isinstance(action, np.ndarray):
            action = float(action.item() if action.ndim == 0 else action[0])

        result = self._game.tick(self.action_to_pointer_x(float(action)))
        self._frames += 1

        terminated = self._game.is_over
        truncated = not terminated and self._frames >= self._config.caps.max_frames

        info = self._game.get_info()
        info["delta_score"] = result.delta_score
        info["life_lost"] = result.life_lost

        if self._debug and (result.delta_score or result.life_lost):
            print(f"[DEBUG] Step {self._frames}: action={action:.3f}, "
                  f"delta_score={result.delta_score}, lives={info['lives']}")
            if terminated:
                print(f"[DEBUG] TERMINATED: score={info['score']}")

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(result.delta_score), terminated, truncated, info

    def _init_renderer(self) -> None:
        from tiltball.core.render_pygame import PygameRenderer
        self._renderer = PygameRenderer(self._config)

    def render(self) -> Optional[np.ndarray]:
        """
        Render the current game state.

        Returns:
            RGB array if render_mode is "rgb_array", None otherwise.
        """
        if self.render_mode is None:
            return None

        if self._renderer is None:
            self._init_renderer()

        commands = self._game.draw_commands()
        if self.render_mode == "rgb_array":
            return self._renderer.render(commands)

        self._renderer.render_to_screen(commands)
        if not self._renderer.handle_events():
            self.close()
        return None

    def close(self) -> None:
        """Clean up resources."""
        if self._renderer is not None:
            self._renderer.close()
            self._renderer = None

    @property
    def game(self) -> CoreGame:
        """Access to underlying game (for debugging/tools)."""
        return self._game

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

"""
Tilt Ball Core - game simulation and its host-facing surfaces.

Main exports:
- CoreGame: Frame-driven game simulation (state, phase, permission gate)
- GameState: Explicit mutable state passed to each frame step
- Phase: Playing / GameOver lifecycle
- TiltInput: Latest-value tilt cell fed by device-motion samples
- GameConfig: Configuration loaded from game_config.yaml
- build_frame: Draw instructions for the current state
- TiltBallEnv: Gymnasium environment where the agent moves the pointer
"""

from tiltball.core.config_loader import GameConfig, load_config, get_config
from tiltball.core.state import Ball, Basket, GameState, Paddle
from tiltball.core.tilt import TiltInput
from tiltball.core.lifecycle import LifecycleController, Phase
from tiltball.core.game import CoreGame, FrameResult
from tiltball.core.draw_commands import build_frame
from tiltball.core.env_gym import TiltBallEnv

__all__ = [
    "GameConfig",
    "load_config",
    "get_config",
    "Ball",
    "Basket",
    "GameState",
    "Paddle",
    "TiltInput",
    "LifecycleController",
    "Phase",
    "CoreGame",
    "FrameResult",
    "build_frame",
    "TiltBallEnv",
]

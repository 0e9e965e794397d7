"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml


Color = Tuple[int, int, int]


@dataclass(frozen=True)
class BoardConfig:
    """Canvas geometry in pixels."""
    width: int
    height: int


@dataclass(frozen=True)
class BallConfig:
    """Ball size and speed limits."""
    radius: float
    serve_speed: float  # |vx| and vy right after a serve
    max_speed: float    # Per-axis cap while airborne (times speed multiplier)


@dataclass(frozen=True)
class PaddleConfig:
    """Triangle paddle pinned to the bottom edge."""
    width: float
    height: float


@dataclass(frozen=True)
class BasketConfig:
    """Moving target near the top of the board."""
    width: float
    height: float
    y: float
    speed: float
    wall_margin: float


@dataclass(frozen=True)
class ScoringConfig:
    """Points and difficulty increments."""
    paddle_points: int
    basket_points: int
    speed_increment: float


@dataclass(frozen=True)
class LivesConfig:
    initial: int


@dataclass(frozen=True)
class TiltConfig:
    """Accelerometer to velocity-influence mapping."""
    sensitivity: float
    limit: float


@dataclass(frozen=True)
class DisplayConfig:
    """Rendering parameters."""
    fps: int
    font_size: int
    font_size_large: int
    basket_outline_width: int
    colors: Dict[str, Color]

    def color(self, name: str) -> Color:
        """Get a named color."""
        if name not in self.colors:
            raise ValueError(f"Unknown color: {name}")
        return self.colors[name]


@dataclass(frozen=True)
class CapsConfig:
    """Episode limits (used by the Gymnasium wrapper)."""
    max_frames: int


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    board: BoardConfig
    ball: BallConfig
    paddle: PaddleConfig
    basket: BasketConfig
    scoring: ScoringConfig
    lives: LivesConfig
    tilt: TiltConfig
    display: DisplayConfig
    caps: CapsConfig

    @property
    def paddle_top_y(self) -> float:
        """Y coordinate of the paddle apex."""
        return self.board.height - self.paddle.height

    @property
    def paddle_x_range(self) -> Tuple[float, float]:
        """Allowed (min_x, max_x) for the paddle centre."""
        half = self.paddle.width / 2
        return (half, self.board.width - half)

    @property
    def basket_x_range(self) -> Tuple[float, float]:
        """Allowed (min_x, max_x) for the basket centre."""
        inset = self.basket.width / 2 + self.basket.wall_margin
        return (inset, self.board.width - inset)


REQUIRED_COLORS = (
    "background", "text", "ball", "paddle", "basket", "basket_outline", "game_over"
)


def _parse_color(color_data: List) -> Color:
    """Parse RGB color from YAML."""
    if len(color_data) != 3:
        raise ValueError(f"Color must have 3 values [R, G, B], got {color_data}")
    return (int(color_data[0]), int(color_data[1]), int(color_data[2]))


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    board = config.board
    if board.width <= 0 or board.height <= 0:
        raise ValueError(f"Board size must be positive, got {board.width}x{board.height}")

    for name, value in (
        ("ball.radius", config.ball.radius),
        ("ball.serve_speed", config.ball.serve_speed),
        ("ball.max_speed", config.ball.max_speed),
        ("paddle.width", config.paddle.width),
        ("paddle.height", config.paddle.height),
        ("basket.width", config.basket.width),
        ("basket.height", config.basket.height),
    ):
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")

    if config.paddle.width > board.width:
        raise ValueError(
            f"paddle.width ({config.paddle.width}) exceeds board width ({board.width})"
        )

    if config.paddle.height >= board.height:
        raise ValueError(
            f"paddle.height ({config.paddle.height}) must be below board height ({board.height})"
        )

    lo, hi = config.basket_x_range
    if lo > hi:
        raise ValueError(
            f"Basket cannot fit: width {config.basket.width} with margin "
            f"{config.basket.wall_margin} on a {board.width}px board"
        )

    if config.tilt.limit <= 0:
        raise ValueError(f"tilt.limit must be positive, got {config.tilt.limit}")

    if config.lives.initial < 1:
        raise ValueError(f"lives.initial must be at least 1, got {config.lives.initial}")

    if config.scoring.speed_increment < 0:
        raise ValueError(
            f"scoring.speed_increment must not be negative, got {config.scoring.speed_increment}"
        )

    missing = [c for c in REQUIRED_COLORS if c not in config.display.colors]
    if missing:
        raise ValueError(f"Missing display colors: {', '.join(missing)}")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    board_data = raw["board"]
    board = BoardConfig(
        width=int(board_data["width"]),
        height=int(board_data["height"])
    )

    ball_data = raw["ball"]
    ball = BallConfig(
        radius=float(ball_data["radius"]),
        serve_speed=float(ball_data.get("serve_speed", 4.0)),
        max_speed=float(ball_data.get("max_speed", 10.0))
    )

    paddle_data = raw["paddle"]
    paddle = PaddleConfig(
        width=float(paddle_data["width"]),
        height=float(paddle_data["height"])
    )

    basket_data = raw["basket"]
    basket = BasketConfig(
        width=float(basket_data["width"]),
        height=float(basket_data["height"]),
        y=float(basket_data["y"]),
        speed=float(basket_data.get("speed", 1.5)),
        wall_margin=float(basket_data.get("wall_margin", 5.0))
    )

    scoring_data = raw["scoring"]
    scoring = ScoringConfig(
        paddle_points=int(scoring_data["paddle_points"]),
        basket_points=int(scoring_data["basket_points"]),
        speed_increment=float(scoring_data.get("speed_increment", 0.05))
    )

    lives = LivesConfig(initial=int(raw.get("lives", {}).get("initial", 3)))

    tilt_data = raw.get("tilt", {})
    tilt = TiltConfig(
        sensitivity=float(tilt_data.get("sensitivity", 0.08)),
        limit=float(tilt_data.get("limit", 0.2))
    )

    display_data = raw.get("display", {})
    display = DisplayConfig(
        fps=int(display_data.get("fps", 60)),
        font_size=int(display_data.get("font_size", 24)),
        font_size_large=int(display_data.get("font_size_large", 48)),
        basket_outline_width=int(display_data.get("basket_outline_width", 3)),
        colors={
            name: _parse_color(value)
            for name, value in display_data.get("colors", {}).items()
        }
    )

    caps_data = raw.get("caps", {})
    caps = CapsConfig(max_frames=int(caps_data.get("max_frames", 10000)))

    config = GameConfig(
        board=board,
        ball=ball,
        paddle=paddle,
        basket=basket,
        scoring=scoring,
        lives=lives,
        tilt=tilt,
        display=display,
        caps=caps
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config

"""
Human Play Mode
================

Play tilt ball interactively with mouse control.

Desktop machines have no accelerometer, so the arrow keys stand in for
device-motion samples: holding a key feeds a constant acceleration, and
releasing all of them feeds zero.

Controls:
    - Mouse: Move paddle
    - Click: Restart after game over
    - Arrow keys: Tilt
    - A / D: Allow / deny sensor access (with --ask-permission)
    - ESC: Quit

Usage:
    python -m tools.play_human [--seed SEED] [--fps FPS] [--ask-permission] [--no-tilt]
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from tiltball.core.config_loader import load_config, GameConfig
from tiltball.core.game import CoreGame
from tiltball.core.render_pygame import PygameRenderer


# Simulated acceleration for a held arrow key, in m/s^2
KEY_ACCELERATION = 2.5


class HumanPlayer:
    """
    Interactive host for CoreGame.

    Supplies the frame tick, the pointer x, keyboard tilt samples and the
    restart click; draws whatever the game hands back.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        target_fps: Optional[int] = None,
        ask_permission: bool = False,
        tilt: bool = True
    ):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required. Install: pip install pygame")

        if config is None:
            config = load_config()

        self._config = config
        self._target_fps = target_fps or config.display.fps

        self._game = CoreGame(config=config, seed=seed, require_permission=ask_permission)
        if not tilt:
            self._game.deny_permission()

        pygame.init()
        self._renderer = PygameRenderer(config)
        self._clock = pygame.time.Clock()

        self._running = True
        self._was_over = False

    def run(self) -> int:
        """Run the game loop. Returns final score."""
        print("=== Tilt Ball ===")
        print("Mouse moves the paddle, arrow keys tilt, click to restart")
        print("ESC to quit")
        if self._game.awaiting_permission:
            print("Press A to allow sensor access, D to play without tilt")
        print()

        while self._running:
            self._handle_events()
            self._feed_tilt()

            pointer_x, _ = pygame.mouse.get_pos()
            self._game.tick(pointer_x)

            if self._game.is_over and not self._was_over:
                print(f"\nGAME OVER - Score: {self._game.score}")
            self._was_over = self._game.is_over

            self._renderer.render_to_screen(self._game.draw_commands())
            self._clock.tick(self._target_fps)

        pygame.quit()
        return self._game.score

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.key == pygame.K_a and self._game.awaiting_permission:
                    self._game.grant_permission()
                elif event.key == pygame.K_d and self._game.awaiting_permission:
                    self._game.deny_permission()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self._game.restart():
                    print("\n=== Game Restarted ===\n")

    def _feed_tilt(self) -> None:
        """Turn held arrow keys into an acceleration sample."""
        ax, ay = self._keyboard_acceleration(pygame.key.get_pressed())
        self._game.on_device_motion(ax, ay)

    @staticmethod
    def _keyboard_acceleration(pressed) -> Tuple[float, float]:
        ax = 0.0
        ay = 0.0
        if pressed[pygame.K_LEFT]:
            ax -= KEY_ACCELERATION
        if pressed[pygame.K_RIGHT]:
            ax += KEY_ACCELERATION
        if pressed[pygame.K_UP]:
            ay -= KEY_ACCELERATION
        if pressed[pygame.K_DOWN]:
            ay += KEY_ACCELERATION
        return ax, ay


def main():
    parser = argparse.ArgumentParser(description="Play tilt ball interactively")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--fps", type=int, default=None, help="Target FPS (default: from config)")
    parser.add_argument("--config", type=str, default=None, help="Path to game_config.yaml")
    parser.add_argument("--ask-permission", action="store_true",
                        help="Wait for sensor access (A to allow, D to deny) before starting")
    parser.add_argument("--no-tilt", action="store_true", help="Play without tilt influence")

    args = parser.parse_args()

    try:
        config = load_config(args.config)
        player = HumanPlayer(
            config=config,
            seed=args.seed,
            target_fps=args.fps,
            ask_permission=args.ask_permission,
            tilt=not args.no_tilt
        )
        score = player.run()
        print(f"\nFinal Score: {score}")
        return 0
    except (ImportError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

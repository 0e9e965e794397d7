"""
Pygame Renderer
===============

Executes draw commands with pygame.
Supports both display mode (human play) and headless RGB output.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

import numpy as np

from tiltball.core.config_loader import GameConfig, get_config
from tiltball.core.draw_commands import Circle, Clear, DrawCommand, Rect, Text, Triangle


class PygameRenderer:
    """
    Draws a frame's command list onto a pygame surface.

    Supports:
    - Screen display for human mode
    - RGB array output for agents and tests
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize renderer.

        Args:
            config: Game configuration.
        """
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame is required for PygameRenderer")

        if config is None:
            config = get_config()

        self._config = config
        self._size = (config.board.width, config.board.height)

        if not pygame.get_init():
            pygame.init()
        pygame.font.init()

        # Display surface (created on demand)
        self._screen: Optional[pygame.Surface] = None

        # Fonts keyed by point size
        self._fonts: Dict[int, pygame.font.Font] = {}

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def render(self, commands: Sequence[DrawCommand]) -> np.ndarray:
        """
        Render to RGB array.

        Args:
            commands: Draw commands for one frame.

        Returns:
            (height, width, 3) uint8 array.
        """
        surface = pygame.Surface(self._size)
        self.draw(surface, commands)
        array = pygame.surfarray.array3d(surface)
        return np.transpose(array, (1, 0, 2)).astype(np.uint8)

    def render_to_screen(self, commands: Sequence[DrawCommand]) -> None:
        """
        Render to the pygame window and flip the display.

        Args:
            commands: Draw commands for one frame.
        """
        if self._screen is None:
            self._screen = pygame.display.set_mode(self._size)
            pygame.display.set_caption("Tilt Ball")

        self.draw(self._screen, commands)
        pygame.display.flip()

    def draw(self, surface: pygame.Surface, commands: Sequence[DrawCommand]) -> None:
        """Execute draw commands in order on a surface."""
        for command in commands:
            if isinstance(command, Clear):
                surface.fill(command.color)
            elif isinstance(command, Rect):
                self._draw_rect(surface, command)
            elif isinstance(command, Circle):
                pygame.draw.circle(
                    surface, command.color,
                    (int(round(command.x)), int(round(command.y))),
                    int(round(command.radius))
                )
            elif isinstance(command, Triangle):
                pygame.draw.polygon(surface, command.color, [command.p1, command.p2, command.p3])
            elif isinstance(command, Text):
                self._draw_text(surface, command)
            else:
                raise ValueError(f"Unknown draw command: {command!r}")

    def _draw_rect(self, surface: pygame.Surface, command: Rect) -> None:
        """Filled rectangle with an optional rim."""
        rect = pygame.Rect(0, 0, int(command.width), int(command.height))
        rect.center = (int(round(command.cx)), int(round(command.cy)))
        pygame.draw.rect(surface, command.fill, rect)
        if command.outline is not None and command.outline_width > 0:
            pygame.draw.rect(surface, command.outline, rect, command.outline_width)

    def _draw_text(self, surface: pygame.Surface, command: Text) -> None:
        """Text centred on its anchor."""
        rendered = self._font(command.size).render(command.text, True, command.color)
        rect = rendered.get_rect(center=(int(command.x), int(command.y)))
        surface.blit(rendered, rect)

    def handle_events(self) -> bool:
        """Handle pygame events. Returns False if quit requested."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    def close(self) -> None:
        """Clean up pygame resources."""
        self._fonts.clear()
        if self._screen is not None:
            self._screen = None

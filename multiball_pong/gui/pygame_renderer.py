"""
PyGame canvas and window host for Multiball Pong
"""

import numpy as np
import pygame

from multiball_pong.gui.keyboard import KeyboardInput
from multiball_pong.utils.config import GameConfig
from multiball_pong.utils.config import game_config

RGB = tuple[int, int, int]


class PygameCanvas:
    """Canvas drawing on a pygame surface (window or off-screen)"""

    def __init__(self, surface: pygame.Surface, clear_color: RGB = (0, 0, 0)):
        self.surface = surface
        self.width, self.height = surface.get_size()
        self.clear_color = clear_color

    def clear(self) -> None:
        """Clear the surface"""
        self.surface.fill(self.clear_color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: RGB) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(self.surface, color, rect)

    def fill_circle(self, x: float, y: float, radius: float, color: RGB) -> None:
        pygame.draw.circle(self.surface, color, (int(x), int(y)), int(radius))

    def stroke_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: RGB,
        width: int = 1,
    ) -> None:
        start_pos = (int(start[0]), int(start[1]))
        end_pos = (int(end[0]), int(end[1]))
        pygame.draw.line(self.surface, color, start_pos, end_pos, width)

    def snapshot(self) -> np.ndarray:
        """Copy of the current pixels as a (width, height, 3) array"""
        return pygame.surfarray.array3d(self.surface)


class PygameHost:
    """Window, keyboard and frame clock backed by pygame"""

    def __init__(self, config: GameConfig | None = None):
        """Initialize pygame and open the game window"""
        self.config = config if config is not None else game_config

        pygame.init()

        self.screen = pygame.display.set_mode((self.config.FIELD_WIDTH, self.config.FIELD_HEIGHT))
        pygame.display.set_caption(self.config.WINDOW_TITLE)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.canvas = PygameCanvas(self.screen)
        self.input = KeyboardInput()
        self.active = True

    def is_active(self) -> bool:
        return self.active

    def pump_events(self) -> None:
        """Drain the pygame event queue into the keyboard listeners"""
        for event in pygame.event.get():
            if self.input.handle_event(event) == "quit":
                self.active = False

    def next_frame(self) -> None:
        """Present the frame and wait for the next one"""
        pygame.display.flip()
        self.clock.tick(self.config.FPS)

    def cleanup(self) -> None:
        """Close the window"""
        self.active = False
        pygame.quit()

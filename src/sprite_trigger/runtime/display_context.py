from __future__ import annotations

from dataclasses import dataclass

import pygame

from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_CAPTION = "sprite-trigger"
CLEAR_COLOR = (24, 24, 32)


@dataclass
class DisplayContext:
    """Own the pygame window, the logical canvas and the frame clock.

    Sprites are drawn onto ``screen`` at logical resolution; ``present``
    scales it up to the window so pixel art stays crisp.
    """

    size: tuple[int, int]
    scale: int = 1
    window: pygame.Surface | None = None
    screen: pygame.Surface | None = None
    clock: pygame.time.Clock | None = None

    def initialize(self) -> None:
        pygame.init()
        width, height = self.size
        self.window = pygame.display.set_mode((width * self.scale, height * self.scale))
        pygame.display.set_caption(WINDOW_CAPTION)
        # No arguments disables key repeat: one KEYDOWN per physical press.
        pygame.key.set_repeat()
        self.screen = pygame.Surface(self.size, pygame.SRCALPHA)
        self.clock = pygame.time.Clock()
        logger.info(
            "Display initialized at %dx%d (scale %d)", width, height, self.scale
        )

    def ensure_initialized(self) -> None:
        if self.clock is None or self.screen is None or self.window is None:
            raise RuntimeError("DisplayContext used before initialize()")

    def clear(self) -> None:
        self.ensure_initialized()
        assert self.screen is not None
        self.screen.fill(CLEAR_COLOR)

    def present(self) -> None:
        self.ensure_initialized()
        assert self.window is not None and self.screen is not None
        # Nearest-neighbour scaling keeps sprite pixels sharp.
        scaled = pygame.transform.scale(self.screen, self.window.get_size())
        self.window.blit(scaled, (0, 0))
        pygame.display.flip()

    def elapsed_seconds(self, max_fps: int) -> float:
        """Wait out the frame budget and return the seconds since the last call."""

        self.ensure_initialized()
        assert self.clock is not None
        return self.clock.tick(max_fps) / 1000.0

    def shutdown(self) -> None:
        pygame.quit()
        self.window = None
        self.screen = None
        self.clock = None

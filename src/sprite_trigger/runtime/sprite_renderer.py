from __future__ import annotations

import pygame

from sprite_trigger.animation.entity import AnimatedSprite
from sprite_trigger.animation.registry import AnimationRegistry

MISSING_SPRITE_COLOR = (200, 0, 200)
MISSING_SPRITE_SIZE = (14, 18)


class SpriteRenderer:
    """Blit each sprite's current sheet frame onto the canvas."""

    def render(self, surface: pygame.Surface, registry: AnimationRegistry) -> int:
        drawn = 0
        for sprite in registry:
            self.draw(surface, sprite)
            drawn += 1
        return drawn

    def draw(self, surface: pygame.Surface, sprite: AnimatedSprite) -> None:
        sheet = sprite.spritesheet
        if sheet is None or not 0 <= sprite.slot.index < sheet.frame_count:
            width, height = MISSING_SPRITE_SIZE
            pygame.draw.rect(
                surface,
                MISSING_SPRITE_COLOR,
                (*sprite.position, width * sprite.scale, height * sprite.scale),
                width=1,
            )
            return

        image = sheet.frame(sprite.slot.index)
        if sprite.scale != 1:
            width, height = image.get_size()
            image = pygame.transform.scale(
                image, (width * sprite.scale, height * sprite.scale)
            )
        surface.blit(image, sprite.position)

import pygame

from sprite_trigger import SpriteTag
from sprite_trigger.animation.clock import FrameSlot
from sprite_trigger.animation.entity import AnimatedSprite
from sprite_trigger.animation.registry import AnimationRegistry
from sprite_trigger.assets.loader import Loader
from sprite_trigger.demo.scene import CHARACTER_LAYOUT, CHARACTER_SHEET
from sprite_trigger.runtime.sprite_renderer import (MISSING_SPRITE_COLOR,
                                                    SpriteRenderer)


class TestSpriteRenderer:
    """Validate that the slot index selects the sub-image that is drawn."""

    def test_draws_current_frame(self, loader: Loader, registry: AnimationRegistry) -> None:
        """Verify the pixels drawn match the sheet cell named by the slot."""
        sheet = loader.load_spritesheet(CHARACTER_SHEET, CHARACTER_LAYOUT)
        sprite = registry.spawn(
            AnimatedSprite(
                tag=SpriteTag.LEFT,
                position=(0, 0),
                slot=FrameSlot(3),
                spritesheet=sheet,
            )
        )
        surface = pygame.Surface((14, 18), pygame.SRCALPHA)

        drawn = SpriteRenderer().render(surface, registry)

        assert drawn == 1
        expected = sheet.frame(sprite.slot.index)
        assert pygame.image.tobytes(surface, "RGBA") == pygame.image.tobytes(
            expected, "RGBA"
        )

    def test_scale_enlarges_frame(self, loader: Loader, registry: AnimationRegistry) -> None:
        """Ensure scaled sprites cover the enlarged area."""
        sheet = loader.load_spritesheet(CHARACTER_SHEET, CHARACTER_LAYOUT)
        registry.spawn(
            AnimatedSprite(
                tag=SpriteTag.LEFT, position=(0, 0), spritesheet=sheet, scale=2
            )
        )
        surface = pygame.Surface((28, 36), pygame.SRCALPHA)
        surface.fill((0, 0, 0, 0))

        SpriteRenderer().render(surface, registry)

        assert surface.get_at((27, 35)).a == 255

    def test_missing_sheet_draws_outline(self, registry: AnimationRegistry) -> None:
        """Confirm sprites without a sheet are still visible as an outline."""
        registry.spawn(AnimatedSprite(tag=SpriteTag.RIGHT, position=(1, 1)))
        surface = pygame.Surface((32, 32))

        SpriteRenderer().render(surface, registry)

        assert tuple(surface.get_at((1, 1)))[:3] == MISSING_SPRITE_COLOR

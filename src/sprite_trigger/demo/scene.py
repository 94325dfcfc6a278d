"""The two-character demo: arrow keys restart each character's animation."""

from __future__ import annotations

from dataclasses import dataclass

from sprite_trigger import SpriteTag
from sprite_trigger.animation.clock import FrameSlot
from sprite_trigger.animation.entity import AnimatedSprite
from sprite_trigger.animation.registry import AnimationRegistry
from sprite_trigger.assets.layout import SpritesheetLayout
from sprite_trigger.assets.loader import Loader
from sprite_trigger.assets.placeholder import placeholder_spritesheet
from sprite_trigger.assets.spritesheet import Spritesheet
from sprite_trigger.errors import (AssetLoadError, AssetMissingError,
                                   InvalidRangeError)
from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)

CHARACTER_SHEET = "characters/chars.png"
# 72 frames of 14x18 px: 18 columns by 4 rows, starting 16 px in and 180 px down.
CHARACTER_LAYOUT = SpritesheetLayout(
    cell_width=14, cell_height=18, columns=18, rows=4, offset_x=16, offset_y=180
)
SPRITE_SCALE = 4


@dataclass(frozen=True, slots=True)
class AnimationSpec:
    tag: SpriteTag
    first_index: int
    last_index: int
    fps: int


DEMO_ANIMATIONS = (
    AnimationSpec(SpriteTag.LEFT, first_index=0, last_index=5, fps=10),
    AnimationSpec(SpriteTag.RIGHT, first_index=18, last_index=23, fps=20),
)


def _position_for(
    index: int, count: int, canvas_size: tuple[int, int], layout: SpritesheetLayout
) -> tuple[int, int]:
    width, height = canvas_size
    sprite_width = layout.cell_width * SPRITE_SCALE
    sprite_height = layout.cell_height * SPRITE_SCALE
    center_x = width * (index + 1) // (count + 1)
    return (center_x - sprite_width // 2, (height - sprite_height) // 2)


def _spawn(
    registry: AnimationRegistry,
    spec: AnimationSpec,
    position: tuple[int, int],
    spritesheet: Spritesheet | None,
) -> AnimatedSprite:
    if spritesheet is not None:
        try:
            sprite = AnimatedSprite.with_clock(
                spec.tag,
                position,
                first_index=spec.first_index,
                last_index=spec.last_index,
                fps=spec.fps,
                spritesheet=spritesheet,
                scale=SPRITE_SCALE,
            )
            return registry.spawn(sprite)
        except InvalidRangeError:
            logger.exception("Cannot animate %s sprite", spec.tag)

    # Still spawn it so the failure is visible on screen.
    return registry.spawn(
        AnimatedSprite(
            tag=spec.tag,
            position=position,
            slot=FrameSlot(spec.first_index),
            spritesheet=spritesheet,
            scale=SPRITE_SCALE,
        )
    )


def setup_demo(
    registry: AnimationRegistry,
    loader: Loader,
    canvas_size: tuple[int, int],
    animations: tuple[AnimationSpec, ...] = DEMO_ANIMATIONS,
    layout: SpritesheetLayout = CHARACTER_LAYOUT,
    placeholder_fallback: bool = False,
) -> list[AnimatedSprite]:
    spritesheet: Spritesheet | None = None
    try:
        spritesheet = loader.load_spritesheet(CHARACTER_SHEET, layout)
    except AssetMissingError as exc:
        if placeholder_fallback:
            logger.warning("%s; animating a generated placeholder sheet instead", exc)
            spritesheet = placeholder_spritesheet(layout)
        else:
            logger.error(
                "%s; spawning sprites without animation. "
                "Run `sprite-trigger generate-sheet` to create a placeholder.",
                exc,
            )
    except AssetLoadError as exc:
        logger.error("%s; spawning sprites without animation", exc)

    return [
        _spawn(
            registry,
            spec,
            _position_for(index, len(animations), canvas_size, layout),
            spritesheet,
        )
        for index, spec in enumerate(animations)
    ]

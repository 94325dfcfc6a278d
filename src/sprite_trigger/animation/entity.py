from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sprite_trigger import SpriteTag
from sprite_trigger.animation.clock import AnimationClock, FrameSlot

if TYPE_CHECKING:
    from sprite_trigger.assets.spritesheet import Spritesheet


@dataclass
class AnimatedSprite:
    """A drawable sprite whose displayed frame may be driven by a clock.

    ``clock`` is ``None`` when the sprite could not be animated, e.g. its
    sheet failed to load. Such sprites are still drawn, just never advanced.
    """

    tag: SpriteTag
    position: tuple[int, int]
    slot: FrameSlot = field(default_factory=FrameSlot)
    clock: AnimationClock | None = None
    spritesheet: Spritesheet | None = None
    scale: int = 1
    entity_id: int = -1

    @classmethod
    def with_clock(
        cls,
        tag: SpriteTag,
        position: tuple[int, int],
        *,
        first_index: int,
        last_index: int,
        fps: int,
        spritesheet: Spritesheet | None = None,
        scale: int = 1,
    ) -> AnimatedSprite:
        if spritesheet is not None:
            spritesheet.layout.validate_range(first_index, last_index)
        slot = FrameSlot(first_index)
        clock = AnimationClock(first_index, last_index, fps, slot=slot)
        return cls(
            tag=tag,
            position=position,
            slot=slot,
            clock=clock,
            spritesheet=spritesheet,
            scale=scale,
        )

    @property
    def is_animated(self) -> bool:
        return self.clock is not None

from sprite_trigger.animation.clock import (AdvanceKind, AdvanceResult,
                                            AnimationClock, FrameSlot)
from sprite_trigger.animation.entity import AnimatedSprite
from sprite_trigger.animation.registry import AnimationRegistry
from sprite_trigger.animation.systems import (execute_animations,
                                              trigger_animation)

__all__ = [
    "AdvanceKind",
    "AdvanceResult",
    "AnimatedSprite",
    "AnimationClock",
    "AnimationRegistry",
    "FrameSlot",
    "execute_animations",
    "trigger_animation",
]

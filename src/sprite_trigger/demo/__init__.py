from sprite_trigger.demo.scene import (CHARACTER_LAYOUT, CHARACTER_SHEET,
                                       DEMO_ANIMATIONS, AnimationSpec,
                                       setup_demo)

__all__ = [
    "AnimationSpec",
    "CHARACTER_LAYOUT",
    "CHARACTER_SHEET",
    "DEMO_ANIMATIONS",
    "setup_demo",
]

from sprite_trigger.assets.layout import SpritesheetLayout
from sprite_trigger.assets.loader import Loader
from sprite_trigger.assets.placeholder import (generate_placeholder_sheet,
                                               placeholder_spritesheet)
from sprite_trigger.assets.spritesheet import Spritesheet

__all__ = [
    "Loader",
    "Spritesheet",
    "SpritesheetLayout",
    "generate_placeholder_sheet",
    "placeholder_spritesheet",
]

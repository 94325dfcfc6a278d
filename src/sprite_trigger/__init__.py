from enum import StrEnum


class SpriteTag(StrEnum):
    LEFT = "left"
    RIGHT = "right"

from __future__ import annotations

from dataclasses import dataclass

from sprite_trigger.errors import InvalidRangeError

Rect = tuple[int, int, int, int]


@dataclass(frozen=True, slots=True)
class SpritesheetLayout:
    """A uniform grid of frames, numbered left-to-right then top-to-bottom."""

    cell_width: int
    cell_height: int
    columns: int
    rows: int
    offset_x: int = 0
    offset_y: int = 0
    padding_x: int = 0
    padding_y: int = 0

    def __post_init__(self) -> None:
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ValueError("cell size must be positive")
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError("grid must have at least one column and one row")
        if min(self.offset_x, self.offset_y, self.padding_x, self.padding_y) < 0:
            raise ValueError("offset and padding must be >= 0")

    @property
    def frame_count(self) -> int:
        return self.columns * self.rows

    @property
    def extent(self) -> tuple[int, int]:
        """Smallest image size (width, height) that contains every cell."""

        width = (
            self.offset_x
            + self.columns * self.cell_width
            + (self.columns - 1) * self.padding_x
        )
        height = (
            self.offset_y
            + self.rows * self.cell_height
            + (self.rows - 1) * self.padding_y
        )
        return width, height

    def rect_for(self, index: int) -> Rect:
        if not 0 <= index < self.frame_count:
            raise IndexError(
                f"frame {index} outside sheet of {self.frame_count} frames"
            )
        column = index % self.columns
        row = index // self.columns
        x = self.offset_x + column * (self.cell_width + self.padding_x)
        y = self.offset_y + row * (self.cell_height + self.padding_y)
        return (x, y, self.cell_width, self.cell_height)

    def validate_range(self, first_index: int, last_index: int) -> None:
        if first_index < 0 or first_index > last_index:
            raise InvalidRangeError(
                f"invalid frame range {first_index}..={last_index}"
            )
        if last_index >= self.frame_count:
            raise InvalidRangeError(
                f"last frame {last_index} outside sheet of {self.frame_count} frames"
            )

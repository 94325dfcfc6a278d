from __future__ import annotations

from pathlib import Path

import pygame

from sprite_trigger.assets.layout import Rect, SpritesheetLayout
from sprite_trigger.errors import AssetLoadError, AssetMissingError


class Spritesheet:
    def __init__(self, filename: str | Path, layout: SpritesheetLayout) -> None:
        path = Path(filename)
        if not path.exists():
            raise AssetMissingError(f"'{path}' does not exist.")

        if not path.is_file():
            raise AssetMissingError(f"'{path}' is not a file.")

        try:
            with path.open("rb") as file_handle:
                sheet = pygame.image.load(file_handle, path.name)
        except pygame.error as exc:
            raise AssetLoadError(f"Unable to decode '{path}': {exc}") from exc

        # convert_alpha needs a display; headless callers keep the raw surface.
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            sheet = sheet.convert_alpha()

        self._attach(path, sheet, layout)

    @classmethod
    def from_surface(
        cls, surface: pygame.Surface, layout: SpritesheetLayout, name: str
    ) -> Spritesheet:
        """Wrap an already drawn surface, e.g. a generated placeholder."""

        spritesheet = cls.__new__(cls)
        spritesheet._attach(Path(name), surface, layout)
        return spritesheet

    def _attach(
        self, path: Path, sheet: pygame.Surface, layout: SpritesheetLayout
    ) -> None:
        self.path = path
        self.sheet = sheet
        self.layout = layout
        self._frame_cache: dict[int, pygame.Surface] = {}

        width, height = self.get_size()
        needed_width, needed_height = layout.extent
        if needed_width > width or needed_height > height:
            raise AssetLoadError(
                f"'{path}' is {width}x{height} but its layout needs "
                f"{needed_width}x{needed_height}"
            )

    def get_size(self) -> tuple[int, int]:
        return self.sheet.get_size()

    @property
    def frame_count(self) -> int:
        return self.layout.frame_count

    def image_at(self, rectangle: Rect) -> pygame.Surface:
        rect = pygame.Rect(rectangle)
        image = pygame.Surface(rect.size, pygame.SRCALPHA)
        image.blit(self.sheet, (0, 0), rect)
        return image

    def frame(self, index: int) -> pygame.Surface:
        cached = self._frame_cache.get(index)
        if cached is not None:
            return cached
        image = self.image_at(self.layout.rect_for(index))
        self._frame_cache[index] = image
        return image

    def frames(self, first_index: int, last_index: int) -> list[pygame.Surface]:
        """Return the inclusive run of frames ``first_index..=last_index``."""

        self.layout.validate_range(first_index, last_index)
        return [self.frame(index) for index in range(first_index, last_index + 1)]

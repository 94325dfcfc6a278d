"""Draw a colour-coded grid sheet so the demo runs without external art."""

from __future__ import annotations

from pathlib import Path

import pygame

from sprite_trigger.assets.layout import SpritesheetLayout
from sprite_trigger.assets.spritesheet import Spritesheet
from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)

BACKGROUND = (0, 0, 0, 0)
ROW_COLORS = [
    (230, 90, 80),
    (90, 190, 110),
    (80, 140, 230),
    (230, 200, 80),
]
MARK_COLOR = (255, 255, 255)


def _cell_color(row: int) -> tuple[int, int, int]:
    return ROW_COLORS[row % len(ROW_COLORS)]


def render_placeholder_sheet(layout: SpritesheetLayout) -> pygame.Surface:
    surface = pygame.Surface(layout.extent, pygame.SRCALPHA)
    surface.fill(BACKGROUND)
    for index in range(layout.frame_count):
        x, y, w, h = layout.rect_for(index)
        column = index % layout.columns
        pygame.draw.rect(surface, _cell_color(index // layout.columns), (x, y, w, h))
        # Bar height encodes the column, row colour encodes the row.
        bar_height = max(1, (column + 1) * h // layout.columns)
        pygame.draw.rect(
            surface,
            MARK_COLOR,
            (x + w // 3, y + h - bar_height, max(1, w // 3), bar_height),
        )
    return surface


def generate_placeholder_sheet(path: str | Path, layout: SpritesheetLayout) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(render_placeholder_sheet(layout), str(target))
    logger.info(
        "Wrote %dx%d placeholder sheet with %d frames to %s",
        *layout.extent,
        layout.frame_count,
        target,
    )
    return target


def placeholder_spritesheet(layout: SpritesheetLayout) -> Spritesheet:
    """Build the placeholder sheet in memory without touching disk."""

    return Spritesheet.from_surface(
        render_placeholder_sheet(layout), layout, name="<placeholder>"
    )

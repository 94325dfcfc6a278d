from pathlib import Path
from typing import Annotated

import typer

from sprite_trigger.animation.registry import AnimationRegistry
from sprite_trigger.assets.loader import Loader
from sprite_trigger.demo.scene import setup_demo
from sprite_trigger.runtime.container import build_runtime_container
from sprite_trigger.runtime.display_context import DisplayContext
from sprite_trigger.runtime.game_loop import GameLoop
from sprite_trigger.runtime.settings import RuntimeSettings
from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    max_fps: Annotated[
        int | None,
        typer.Option("--max-fps", min=1, help="Frame rate cap for the main loop"),
    ] = None,
    scale: Annotated[
        int | None,
        typer.Option("--scale", min=1, help="Window pixels per canvas pixel"),
    ] = None,
    asset_root: Annotated[
        Path | None,
        typer.Option("--asset-root", help="Directory holding characters/chars.png"),
    ] = None,
    max_frames: Annotated[
        int | None,
        typer.Option("--max-frames", min=1, help="Exit after this many frames"),
    ] = None,
) -> None:
    settings = RuntimeSettings.from_environment(
        max_fps=max_fps,
        window_scale=scale,
        asset_root=asset_root,
    )
    resolver = build_runtime_container(settings=settings)

    display = resolver.resolve(DisplayContext)
    display.initialize()
    sprites = setup_demo(
        resolver.resolve(AnimationRegistry),
        resolver.resolve(Loader),
        canvas_size=settings.window_size,
        placeholder_fallback=settings.placeholder_fallback,
    )
    logger.info(
        "Spawned %d sprites; press the left/right arrow keys to animate them",
        len(sprites),
    )

    loop = resolver.resolve(GameLoop)
    loop.start(max_frames=max_frames)

from os import PathLike
from pathlib import Path

from sprite_trigger.assets.layout import SpritesheetLayout
from sprite_trigger.assets.spritesheet import Spritesheet
from sprite_trigger.utilities.env import Configuration
from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)


class Loader:
    def __init__(self, asset_root: str | PathLike[str] | None = None) -> None:
        self.asset_root = (
            Path(asset_root) if asset_root is not None else Configuration.asset_root()
        )
        self._spritesheets: dict[tuple[Path, SpritesheetLayout], Spritesheet] = {}

    def resolve_path(self, path: str | PathLike[str]) -> Path:
        """Return ``path`` as-is when absolute, else relative to the asset root."""

        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.asset_root / candidate

    def load_spritesheet(
        self, path: str | PathLike[str], layout: SpritesheetLayout
    ) -> Spritesheet:
        resolved_path = self.resolve_path(path)
        key = (resolved_path, layout)
        cached = self._spritesheets.get(key)
        if cached is not None:
            return cached
        logger.info("Loading spritesheet %s", resolved_path)
        loaded = Spritesheet(resolved_path, layout)
        self._spritesheets[key] = loaded
        return loaded

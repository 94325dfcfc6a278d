from pathlib import Path

from sprite_trigger.utilities.env.parsing import _env_flag, _env_path

ASSET_ROOT_ENV_VAR = "SPRITE_TRIGGER_ASSET_ROOT"
PLACEHOLDER_FALLBACK_ENV_VAR = "SPRITE_TRIGGER_PLACEHOLDER_FALLBACK"


def default_asset_root() -> Path:
    return Path(__file__).resolve().parents[2] / "assets" / "data"


class AssetsConfiguration:
    @classmethod
    def asset_root(cls) -> Path:
        return _env_path(ASSET_ROOT_ENV_VAR, default=default_asset_root())

    @classmethod
    def placeholder_fallback(cls) -> bool:
        """Draw the placeholder sheet in memory when the real one is missing."""

        return _env_flag(PLACEHOLDER_FALLBACK_ENV_VAR, default=True)

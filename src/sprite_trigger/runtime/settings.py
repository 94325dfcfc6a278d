from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sprite_trigger.utilities.env import Configuration


@dataclass(frozen=True)
class RuntimeSettings:
    max_fps: int
    window_size: tuple[int, int]
    window_scale: int
    asset_root: Path
    placeholder_fallback: bool = False

    @classmethod
    def from_environment(
        cls,
        *,
        max_fps: int | None = None,
        window_scale: int | None = None,
        asset_root: Path | None = None,
        placeholder_fallback: bool | None = None,
    ) -> RuntimeSettings:
        """Read settings from the environment; explicit arguments win."""

        return cls(
            max_fps=max_fps if max_fps is not None else Configuration.max_fps(),
            window_size=Configuration.window_size(),
            window_scale=(
                window_scale
                if window_scale is not None
                else Configuration.window_scale()
            ),
            asset_root=asset_root if asset_root is not None else Configuration.asset_root(),
            placeholder_fallback=(
                placeholder_fallback
                if placeholder_fallback is not None
                else Configuration.placeholder_fallback()
            ),
        )

from pathlib import Path

import pytest

from sprite_trigger.runtime.settings import RuntimeSettings
from sprite_trigger.utilities.env import Configuration
from sprite_trigger.utilities.env.assets import default_asset_root


class TestConfiguration:
    """Validate environment-driven configuration defaults and overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Confirm the demo runs with sensible defaults when nothing is set."""
        for name in (
            "SPRITE_TRIGGER_MAX_FPS",
            "SPRITE_TRIGGER_WINDOW_SCALE",
            "SPRITE_TRIGGER_WINDOW_SIZE",
            "SPRITE_TRIGGER_ASSET_ROOT",
            "SPRITE_TRIGGER_PLACEHOLDER_FALLBACK",
        ):
            monkeypatch.delenv(name, raising=False)

        assert Configuration.max_fps() == 60
        assert Configuration.window_scale() == 4
        assert Configuration.window_size() == (320, 180)
        assert Configuration.asset_root() == default_asset_root()
        assert Configuration.placeholder_fallback() is True

    def test_environment_overrides(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Verify each setting follows its environment variable."""
        monkeypatch.setenv("SPRITE_TRIGGER_MAX_FPS", "144")
        monkeypatch.setenv("SPRITE_TRIGGER_WINDOW_SCALE", "2")
        monkeypatch.setenv("SPRITE_TRIGGER_WINDOW_SIZE", "200x100")
        monkeypatch.setenv("SPRITE_TRIGGER_ASSET_ROOT", str(tmp_path))

        assert Configuration.max_fps() == 144
        assert Configuration.window_scale() == 2
        assert Configuration.window_size() == (200, 100)
        assert Configuration.asset_root() == tmp_path

    def test_invalid_fps_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Ensure a zero frame cap is reported instead of hanging the loop."""
        monkeypatch.setenv("SPRITE_TRIGGER_MAX_FPS", "0")

        with pytest.raises(ValueError):
            Configuration.max_fps()

    def test_runtime_settings_prefer_explicit_values(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Confirm command-line values win over the environment."""
        monkeypatch.setenv("SPRITE_TRIGGER_MAX_FPS", "144")
        monkeypatch.setenv("SPRITE_TRIGGER_WINDOW_SCALE", "2")

        settings = RuntimeSettings.from_environment(
            max_fps=30, window_scale=5, asset_root=tmp_path
        )

        assert settings.max_fps == 30
        assert settings.window_scale == 5
        assert settings.asset_root == tmp_path

    @pytest.mark.parametrize(("value", "expected"), [("0", False), ("yes", True)])
    def test_placeholder_fallback_follows_environment(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
    ) -> None:
        """Verify the placeholder fallback can be switched off for real art."""
        monkeypatch.setenv("SPRITE_TRIGGER_PLACEHOLDER_FALLBACK", value)

        assert Configuration.placeholder_fallback() is expected
        assert RuntimeSettings.from_environment().placeholder_fallback is expected

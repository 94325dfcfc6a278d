from collections import deque
from pathlib import Path
from typing import Callable

import pygame
import pytest
from hypothesis import HealthCheck, settings

from sprite_trigger.animation.registry import AnimationRegistry
from sprite_trigger.assets.layout import SpritesheetLayout
from sprite_trigger.assets.loader import Loader
from sprite_trigger.assets.placeholder import generate_placeholder_sheet
from sprite_trigger.demo.scene import CHARACTER_LAYOUT, CHARACTER_SHEET
from sprite_trigger.runtime.settings import RuntimeSettings

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class _StubClock:
    """Stand-in for ``pygame.time.Clock`` that replays scripted frame times."""

    def __init__(self, *times: int, default: int = 0) -> None:
        self._times: deque[int] = deque(times)
        self._default = default

    def get_time(self) -> int:
        return self._times.popleft() if self._times else self._default

    def tick(self, framerate: int = 0) -> int:
        return self.get_time()


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def init_pygame(dummy_sdl_video_driver: None) -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def stub_clock_factory() -> Callable[..., _StubClock]:
    def _factory(*times: int, **kwargs) -> _StubClock:
        return _StubClock(*times, **kwargs)

    return _factory


@pytest.fixture
def registry() -> AnimationRegistry:
    return AnimationRegistry()


@pytest.fixture
def small_layout() -> SpritesheetLayout:
    return SpritesheetLayout(cell_width=4, cell_height=6, columns=4, rows=2)


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """An asset root containing a generated demo character sheet."""

    generate_placeholder_sheet(tmp_path / CHARACTER_SHEET, CHARACTER_LAYOUT)
    return tmp_path


@pytest.fixture
def loader(asset_root: Path) -> Loader:
    return Loader(asset_root=asset_root)


@pytest.fixture
def runtime_settings(asset_root: Path) -> RuntimeSettings:
    return RuntimeSettings(
        max_fps=60,
        window_size=(160, 90),
        window_scale=1,
        asset_root=asset_root,
    )

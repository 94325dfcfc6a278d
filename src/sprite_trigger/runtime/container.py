from __future__ import annotations

from typing import Any, Mapping

from lagom import Container, Singleton

from sprite_trigger.animation.registry import AnimationRegistry
from sprite_trigger.assets.loader import Loader
from sprite_trigger.input.keyboard import KeyboardTriggers
from sprite_trigger.runtime.display_context import DisplayContext
from sprite_trigger.runtime.event_handler import PygameEventHandler
from sprite_trigger.runtime.game_loop import GameLoop
from sprite_trigger.runtime.settings import RuntimeSettings
from sprite_trigger.runtime.sprite_renderer import SpriteRenderer
from sprite_trigger.utilities.logging import get_logger

RuntimeContainer = Container

logger = get_logger(__name__)


def _build_keyboard_triggers(_: RuntimeContainer) -> KeyboardTriggers:
    return KeyboardTriggers()


def _build_loader(resolver: RuntimeContainer) -> Loader:
    return Loader(asset_root=resolver[RuntimeSettings].asset_root)


def _build_display_context(resolver: RuntimeContainer) -> DisplayContext:
    settings = resolver[RuntimeSettings]
    return DisplayContext(size=settings.window_size, scale=settings.window_scale)


def _build_event_handler(resolver: RuntimeContainer) -> PygameEventHandler:
    return PygameEventHandler(triggers=resolver[KeyboardTriggers])


def _build_game_loop(resolver: RuntimeContainer) -> GameLoop:
    return GameLoop(
        display=resolver[DisplayContext],
        event_handler=resolver[PygameEventHandler],
        renderer=resolver[SpriteRenderer],
        registry=resolver[AnimationRegistry],
        triggers=resolver[KeyboardTriggers],
        max_fps=resolver[RuntimeSettings].max_fps,
    )


def build_runtime_container(
    settings: RuntimeSettings | None = None,
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = Container()
    logger.debug("Created Lagom container for runtime configuration.")
    configure_runtime_container(
        container=container,
        settings=settings or RuntimeSettings.from_environment(),
        overrides=overrides,
    )
    return container


def configure_runtime_container(
    *,
    container: RuntimeContainer,
    settings: RuntimeSettings,
    overrides: Mapping[type[Any], object] | None = None,
) -> None:
    logger.debug(
        "Configuring Lagom runtime container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )
    _bind(container, overrides, RuntimeSettings, settings)
    _bind(container, overrides, AnimationRegistry, Singleton(AnimationRegistry))
    _bind(container, overrides, KeyboardTriggers, Singleton(_build_keyboard_triggers))
    _bind(container, overrides, SpriteRenderer, Singleton(SpriteRenderer))
    _bind(container, overrides, Loader, Singleton(_build_loader))
    _bind(container, overrides, DisplayContext, Singleton(_build_display_context))
    _bind(container, overrides, PygameEventHandler, Singleton(_build_event_handler))
    _bind(container, overrides, GameLoop, Singleton(_build_game_loop))


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    if key in container.defined_types:
        logger.debug("Lagom already defined %s; skipping registration.", key)
        return
    container[key] = value
    logger.debug("Registered Lagom provider for %s.", key)

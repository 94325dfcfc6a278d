from __future__ import annotations

from sprite_trigger.animation.clock import AdvanceResult
from sprite_trigger.animation.registry import AnimationRegistry
from sprite_trigger.animation.systems import (execute_animations,
                                              trigger_animation)
from sprite_trigger.input.keyboard import KeyboardTriggers, TriggerEvent
from sprite_trigger.runtime.display_context import DisplayContext
from sprite_trigger.runtime.event_handler import PygameEventHandler
from sprite_trigger.runtime.sprite_renderer import SpriteRenderer
from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)


class GameLoop:
    """Drive input, animation and drawing once per frame.

    Frame order is fixed: pending input is drained first, so a trigger
    re-arms its clock before that same frame's tick, then every clock is
    ticked, then the canvas is drawn.
    """

    def __init__(
        self,
        display: DisplayContext,
        event_handler: PygameEventHandler,
        renderer: SpriteRenderer,
        registry: AnimationRegistry,
        triggers: KeyboardTriggers,
        max_fps: int,
    ) -> None:
        self.display = display
        self.event_handler = event_handler
        self.renderer = renderer
        self.registry = registry
        self.triggers = triggers
        self.max_fps = max_fps
        self.running = False
        self.frame_count = 0
        self._subscription = triggers.events.subscribe(self._on_trigger)

    def _on_trigger(self, event: TriggerEvent) -> None:
        trigger_animation(self.registry, event.tag)

    def step(self, elapsed: float) -> dict[int, AdvanceResult]:
        results = execute_animations(self.registry, elapsed)
        if self.display.screen is not None:
            self.display.clear()
            self.renderer.render(self.display.screen, self.registry)
        self.frame_count += 1
        return results

    def run_frame(self, elapsed: float) -> bool:
        running = self.event_handler.handle_events()
        if running:
            self.step(elapsed)
        return running

    def start(self, max_frames: int | None = None) -> None:
        logger.info("Starting GameLoop with %d sprites", len(self.registry))
        if self.display.clock is None:
            self.display.initialize()

        self.running = True
        elapsed = 0.0
        try:
            while self.running:
                self.running = self.run_frame(elapsed)
                if not self.running:
                    break
                self.display.present()
                elapsed = self.display.elapsed_seconds(self.max_fps)
                if max_frames is not None and self.frame_count >= max_frames:
                    break
        finally:
            logger.info("Shutting down GameLoop after %d frames", self.frame_count)
            self.stop()

    def stop(self) -> None:
        self.running = False
        self._subscription.dispose()
        self.display.shutdown()

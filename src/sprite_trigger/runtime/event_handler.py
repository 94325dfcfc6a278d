from __future__ import annotations

import pygame

from sprite_trigger.input.keyboard import KeyboardTriggers
from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)


class PygameEventHandler:
    def __init__(self, triggers: KeyboardTriggers) -> None:
        self.triggers = triggers

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            logger.info("Received quit event")
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                logger.info("Escape pressed, stopping")
                return False
            self.triggers.handle_key_down(event.key)
        return True

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            running = self.handle_event(event) and running
        return running

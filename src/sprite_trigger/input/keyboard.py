from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Mapping

import pygame
import reactivex
from reactivex import operators as ops
from reactivex.subject import Subject

from sprite_trigger import SpriteTag
from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BINDINGS: dict[int, SpriteTag] = {
    pygame.K_LEFT: SpriteTag.LEFT,
    pygame.K_RIGHT: SpriteTag.RIGHT,
}


@dataclass(frozen=True, slots=True)
class TriggerEvent:
    tag: SpriteTag
    key: int
    timestamp_ms: float


class KeyboardTriggers:
    """Publish one :class:`TriggerEvent` per key-press edge of a bound key.

    Only ``KEYDOWN`` edges are fed in; key repeat is switched off on the
    display, so holding a key never produces more than one event.
    """

    def __init__(self, bindings: Mapping[int, SpriteTag] | None = None) -> None:
        self.bindings: dict[int, SpriteTag] = dict(
            DEFAULT_BINDINGS if bindings is None else bindings
        )
        self._events: Subject[TriggerEvent] = Subject()

    @property
    def events(self) -> reactivex.Observable[TriggerEvent]:
        return self._events

    def observe_tag(self, tag: SpriteTag) -> reactivex.Observable[TriggerEvent]:
        return self._events.pipe(ops.filter(lambda event: event.tag == tag))

    def bind(self, key: int, tag: SpriteTag) -> None:
        self.bindings[key] = tag

    def handle_key_down(self, key: int) -> TriggerEvent | None:
        tag = self.bindings.get(key)
        if tag is None:
            return None
        event = TriggerEvent(tag=tag, key=key, timestamp_ms=time.monotonic() * 1000)
        logger.debug("Key %d triggered %s", key, tag)
        self._events.on_next(event)
        return event

    def close(self) -> None:
        self._events.on_completed()

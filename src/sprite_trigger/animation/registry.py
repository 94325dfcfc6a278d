from __future__ import annotations

from itertools import count
from typing import Iterator

from sprite_trigger import SpriteTag
from sprite_trigger.animation.entity import AnimatedSprite
from sprite_trigger.errors import MultipleMatchesError, NotFoundError
from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)


class AnimationRegistry:
    """Owns the spawned sprites and looks them up by tag."""

    def __init__(self) -> None:
        self._entities: dict[int, AnimatedSprite] = {}
        self._ids = count()

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[AnimatedSprite]:
        return iter(list(self._entities.values()))

    def spawn(self, sprite: AnimatedSprite) -> AnimatedSprite:
        sprite.entity_id = next(self._ids)
        self._entities[sprite.entity_id] = sprite
        logger.debug(
            "Spawned %s sprite as entity %d (animated=%s)",
            sprite.tag,
            sprite.entity_id,
            sprite.is_animated,
        )
        return sprite

    def despawn(self, entity_id: int) -> AnimatedSprite:
        try:
            sprite = self._entities.pop(entity_id)
        except KeyError as exc:
            raise NotFoundError(f"No entity with id {entity_id}") from exc
        logger.debug("Despawned entity %d", entity_id)
        return sprite

    def get(self, entity_id: int) -> AnimatedSprite:
        try:
            return self._entities[entity_id]
        except KeyError as exc:
            raise NotFoundError(f"No entity with id {entity_id}") from exc

    def with_tag(self, tag: SpriteTag) -> list[AnimatedSprite]:
        return [sprite for sprite in self._entities.values() if sprite.tag == tag]

    def single(self, tag: SpriteTag) -> AnimatedSprite:
        matches = self.with_tag(tag)
        if not matches:
            raise NotFoundError(f"No entity tagged {tag!s}")
        if len(matches) > 1:
            raise MultipleMatchesError(
                f"Expected one entity tagged {tag!s}, found {len(matches)}"
            )
        return matches[0]

    def animated(self) -> Iterator[AnimatedSprite]:
        for sprite in list(self._entities.values()):
            if sprite.clock is not None:
                yield sprite

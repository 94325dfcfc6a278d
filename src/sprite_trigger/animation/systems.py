"""Per-frame functions that drive every clock in a registry."""

from __future__ import annotations

from sprite_trigger import SpriteTag
from sprite_trigger.animation.clock import AdvanceResult
from sprite_trigger.animation.registry import AnimationRegistry
from sprite_trigger.errors import MultipleMatchesError, NotFoundError
from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)


def execute_animations(
    registry: AnimationRegistry, elapsed: float
) -> dict[int, AdvanceResult]:
    """Tick every animated sprite once with ``elapsed`` seconds."""

    results: dict[int, AdvanceResult] = {}
    for sprite in registry.animated():
        assert sprite.clock is not None
        result = sprite.clock.tick(elapsed)
        if result.changed:
            logger.debug(
                "Entity %d (%s) %s to frame %d",
                sprite.entity_id,
                sprite.tag,
                result.kind,
                result.index,
            )
        results[sprite.entity_id] = result
    return results


def trigger_animation(registry: AnimationRegistry, tag: SpriteTag) -> bool:
    """Re-arm the countdown of the one sprite tagged ``tag``.

    Returns ``False`` when nothing was retriggered.
    """

    try:
        sprite = registry.single(tag)
    except (NotFoundError, MultipleMatchesError):
        logger.exception("Cannot trigger animation for %s", tag)
        return False

    if sprite.clock is None:
        logger.warning("Entity %d (%s) has no animation clock", sprite.entity_id, tag)
        return False

    sprite.clock.retrigger()
    logger.debug("Retriggered entity %d (%s)", sprite.entity_id, tag)
    return True

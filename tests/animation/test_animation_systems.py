"""Validate the per-frame tick and trigger functions."""

from sprite_trigger import SpriteTag
from sprite_trigger.animation.clock import AdvanceKind
from sprite_trigger.animation.entity import AnimatedSprite
from sprite_trigger.animation.registry import AnimationRegistry
from sprite_trigger.animation.systems import (execute_animations,
                                              trigger_animation)


def _spawn_pair(registry: AnimationRegistry) -> tuple[AnimatedSprite, AnimatedSprite]:
    left = registry.spawn(
        AnimatedSprite.with_clock(
            SpriteTag.LEFT, (0, 0), first_index=0, last_index=3, fps=10
        )
    )
    right = registry.spawn(
        AnimatedSprite.with_clock(
            SpriteTag.RIGHT, (0, 0), first_index=10, last_index=11, fps=20
        )
    )
    return left, right


class TestExecuteAnimations:
    """Ensure every clock is ticked once per frame and writes its sprite slot."""

    def test_ticks_every_animated_sprite(self, registry: AnimationRegistry) -> None:
        """Verify each sprite advances on its own schedule."""
        left, right = _spawn_pair(registry)

        results = execute_animations(registry, 0.05)

        assert results[left.entity_id].kind is AdvanceKind.NO_ADVANCE
        assert results[right.entity_id].kind is AdvanceKind.ADVANCED
        assert left.slot.index == 0
        assert right.slot.index == 11

    def test_sprites_without_clock_are_skipped(
        self, registry: AnimationRegistry
    ) -> None:
        """Confirm static sprites produce no results and keep their frame."""
        static = registry.spawn(AnimatedSprite(tag=SpriteTag.LEFT, position=(0, 0)))

        results = execute_animations(registry, 1.0)

        assert results == {}
        assert static.slot.index == 0

    def test_runs_scenario_through_slots(self, registry: AnimationRegistry) -> None:
        """Walk, wrap, park and resume as seen by the renderer's slot."""
        left, _ = _spawn_pair(registry)
        observed = []

        for _ in range(5):
            execute_animations(registry, 0.1)
            observed.append(left.slot.index)
        trigger_animation(registry, SpriteTag.LEFT)
        execute_animations(registry, 0.1)
        observed.append(left.slot.index)

        assert observed == [1, 2, 3, 0, 0, 1]


class TestTriggerAnimation:
    """Ensure triggers reach the right sprite and never raise mid-frame."""

    def test_retriggers_only_tagged_sprite(self, registry: AnimationRegistry) -> None:
        """Verify a trigger re-arms only the sprite carrying the tag."""
        left, right = _spawn_pair(registry)
        execute_animations(registry, 0.04)

        assert trigger_animation(registry, SpriteTag.LEFT) is True

        assert left.clock.remaining == left.clock.period
        assert right.clock.remaining < right.clock.period
        assert left.slot.index == 0

    def test_missing_tag_reports_false(self, registry: AnimationRegistry) -> None:
        """Confirm an unknown tag is logged and reported, not raised."""
        registry.spawn(AnimatedSprite(tag=SpriteTag.LEFT, position=(0, 0)))

        assert trigger_animation(registry, SpriteTag.RIGHT) is False

    def test_duplicate_tag_reports_false(self, registry: AnimationRegistry) -> None:
        """Confirm ambiguous triggers are refused rather than guessed."""
        _spawn_pair(registry)
        registry.spawn(
            AnimatedSprite.with_clock(
                SpriteTag.LEFT, (0, 0), first_index=0, last_index=1, fps=5
            )
        )

        assert trigger_animation(registry, SpriteTag.LEFT) is False

    def test_sprite_without_clock_reports_false(
        self, registry: AnimationRegistry
    ) -> None:
        """Ensure triggering a static sprite is a harmless no-op."""
        registry.spawn(AnimatedSprite(tag=SpriteTag.LEFT, position=(0, 0)))

        assert trigger_animation(registry, SpriteTag.LEFT) is False

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from sprite_trigger.errors import InvalidRangeError
from sprite_trigger.utilities.logging import get_logger

logger = get_logger(__name__)


class AdvanceKind(StrEnum):
    NO_ADVANCE = "no_advance"
    ADVANCED = "advanced"
    WRAPPED = "wrapped"


@dataclass(frozen=True, slots=True)
class AdvanceResult:
    kind: AdvanceKind
    index: int

    @classmethod
    def no_advance(cls, index: int) -> AdvanceResult:
        return cls(AdvanceKind.NO_ADVANCE, index)

    @classmethod
    def advanced(cls, index: int) -> AdvanceResult:
        return cls(AdvanceKind.ADVANCED, index)

    @classmethod
    def wrapped(cls, index: int) -> AdvanceResult:
        return cls(AdvanceKind.WRAPPED, index)

    @property
    def changed(self) -> bool:
        return self.kind is not AdvanceKind.NO_ADVANCE


@dataclass(slots=True)
class FrameSlot:
    """The sprite-sheet index a renderer reads; owned by the sprite entity."""

    index: int = 0


NANOS_PER_SECOND = 1_000_000_000
# Rounding residue from float seconds; a countdown at or below this has
# reached its threshold.
THRESHOLD_TOLERANCE_NS = 1_000


def seconds_to_nanos(seconds: float) -> int:
    return round(seconds * NANOS_PER_SECOND)


class AnimationClock:
    """Countdown that steps a sprite through ``first_index..=last_index``.

    The countdown is kept in whole nanoseconds. Each tick subtracts the
    elapsed time from it. When the countdown reaches zero the displayed
    frame moves forward by one and the countdown is re-armed. Reaching zero
    on ``last_index`` wraps back to ``first_index`` and leaves the countdown
    at zero, so the animation rests on its first frame until
    :meth:`retrigger` is called.

    The range and frame rate are fixed at construction.
    """

    __slots__ = (
        "_first_index",
        "_last_index",
        "_fps",
        "_period_ns",
        "_remaining_ns",
        "slot",
    )

    def __init__(
        self,
        first_index: int,
        last_index: int,
        fps: int,
        slot: FrameSlot | None = None,
    ) -> None:
        if fps <= 0:
            raise InvalidRangeError(f"fps must be positive, got {fps}")
        if first_index < 0:
            raise InvalidRangeError(f"first_index must be >= 0, got {first_index}")
        if first_index > last_index:
            raise InvalidRangeError(
                f"first_index {first_index} is after last_index {last_index}"
            )
        self._first_index = first_index
        self._last_index = last_index
        self._fps = fps
        self._period_ns = NANOS_PER_SECOND // fps
        self._remaining_ns = self._period_ns
        if slot is None:
            slot = FrameSlot(first_index)
        elif not first_index <= slot.index <= last_index:
            logger.debug(
                "Moving slot from frame %d onto range start %d",
                slot.index,
                first_index,
            )
            slot.index = first_index
        self.slot = slot

    def __repr__(self) -> str:
        return (
            f"AnimationClock(first_index={self._first_index}, "
            f"last_index={self._last_index}, fps={self._fps}, "
            f"current_index={self.current_index}, "
            f"remaining_ns={self._remaining_ns})"
        )

    @property
    def first_index(self) -> int:
        return self._first_index

    @property
    def last_index(self) -> int:
        return self._last_index

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def period_ns(self) -> int:
        return self._period_ns

    @property
    def remaining_ns(self) -> int:
        return self._remaining_ns

    @property
    def period(self) -> float:
        return self._period_ns / NANOS_PER_SECOND

    @property
    def remaining(self) -> float:
        return self._remaining_ns / NANOS_PER_SECOND

    @property
    def current_index(self) -> int:
        return self.slot.index

    @property
    def is_running(self) -> bool:
        return self._remaining_ns > 0

    def tick(self, elapsed: float) -> AdvanceResult:
        if not self.is_running:
            # Parked at the threshold after a wrap; only retrigger re-arms it.
            return AdvanceResult.no_advance(self.current_index)

        self._remaining_ns -= max(seconds_to_nanos(elapsed), 0)
        if self._remaining_ns > THRESHOLD_TOLERANCE_NS:
            return AdvanceResult.no_advance(self.current_index)

        if self.slot.index >= self._last_index:
            self.slot.index = self._first_index
            self._remaining_ns = 0
            return AdvanceResult.wrapped(self.current_index)

        self.slot.index += 1
        self._remaining_ns = self._period_ns
        return AdvanceResult.advanced(self.current_index)

    def retrigger(self) -> None:
        self._remaining_ns = self._period_ns

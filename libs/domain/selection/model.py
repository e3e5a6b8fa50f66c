from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ports.input import PointerSample

from domain.errors import SelectionCancelled
from domain.types import BoundingBox, Coord


class GestureState(str, Enum):
    IDLE = "IDLE"
    SELECTING = "SELECTING"
    COMPLETE = "COMPLETE"
    CANCELLED = "CANCELLED"


TERMINAL_STATES = frozenset({GestureState.COMPLETE, GestureState.CANCELLED})


@dataclass(frozen=True)
class SelectionGesture:
    state: GestureState = GestureState.IDLE
    start: Coord | None = None
    end: Coord | None = None

    @property
    def done(self) -> bool:
        return self.state in TERMINAL_STATES

    def cancel(self) -> SelectionGesture:
        if self.done:
            return self
        return replace(self, state=GestureState.CANCELLED)

    def to_box(self) -> BoundingBox:
        """Normalized box for a completed drag, whichever way it went."""
        if self.state is not GestureState.COMPLETE or self.start is None or self.end is None:
            raise SelectionCancelled(f"no completed selection (state={self.state.value})")
        return BoundingBox.normalized(self.start.x, self.start.y, self.end.x, self.end.y)


def advance(gesture: SelectionGesture, sample: PointerSample) -> SelectionGesture:
    """Pure transition: start latches on the first press, end on the first release."""
    if gesture.done:
        return gesture
    here = Coord(sample.x, sample.y)
    if gesture.state is GestureState.IDLE:
        if sample.primary_pressed:
            return replace(gesture, state=GestureState.SELECTING, start=here)
        return gesture
    # SELECTING
    if sample.primary_pressed:
        return gesture
    return replace(gesture, state=GestureState.COMPLETE, end=here)

from __future__ import annotations

from collections.abc import Iterable

from ports.input import PointerPort, PointerSample


def drag(x1: int, y1: int, x2: int, y2: int, hold: int = 2) -> list[PointerSample]:
    """Samples for idle -> press at (x1, y1) -> move -> release at (x2, y2)."""
    return [
        PointerSample(x1, y1, False),
        *[PointerSample(x1, y1, True) for _ in range(hold)],
        PointerSample((x1 + x2) // 2, (y1 + y2) // 2, True),
        PointerSample(x2, y2, False),
    ]


class ScriptedPointerPort(PointerPort):
    """Replays samples in order, then repeats the last one forever."""

    def __init__(self, samples: Iterable[PointerSample]) -> None:
        self._samples = list(samples) or [PointerSample(0, 0, False)]
        self._i = 0
        self.polls = 0
        self.closed = False

    def poll(self) -> PointerSample:
        self.polls += 1
        s = self._samples[min(self._i, len(self._samples) - 1)]
        self._i += 1
        return s

    def close(self) -> None:
        self.closed = True

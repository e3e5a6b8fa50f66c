from __future__ import annotations

from ports.time import ClockPort, SleeperPort


class FakeClockPort(ClockPort):
    """Manual clock; only moves when advanced."""

    def __init__(self, start: float = 0.0) -> None:
        self.t = float(start)

    def now(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


class FakeSleeperPort(SleeperPort):
    """Advances the paired fake clock instead of blocking."""

    def __init__(self, clock: FakeClockPort | None = None) -> None:
        self.clock = clock
        self.slept: list[float] = []

    def sleep(self, seconds: float) -> None:
        self.slept.append(seconds)
        if self.clock is not None:
            self.clock.advance(seconds)

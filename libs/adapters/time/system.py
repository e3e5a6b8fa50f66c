from __future__ import annotations

import time

from ports.time import ClockPort, SleeperPort


class SystemClockPort(ClockPort):
    """Monotonic wall-clock via perf_counter."""

    def now(self) -> float:
        return time.perf_counter()


class SystemSleeperPort(SleeperPort):
    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

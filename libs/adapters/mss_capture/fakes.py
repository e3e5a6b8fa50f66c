from __future__ import annotations

from collections.abc import Mapping, Sequence

from domain.errors import CaptureError, EnumerationError
from ports.vision import CapturePort, Frame, Monitor, MonitorPort


def solid_frame(width: int, height: int, bgra: tuple[int, int, int, int] = (0, 0, 0, 255)) -> Frame:
    return Frame(width=width, height=height, bgra=bytes(bgra) * (width * height))


class FakeMonitorPort(MonitorPort):
    def __init__(self, monitors: Sequence[Monitor] = (), fail: bool = False) -> None:
        self.monitors = list(monitors)
        self.fail = fail
        self.calls = 0

    def list_monitors(self) -> list[Monitor]:
        self.calls += 1
        if self.fail:
            raise EnumerationError("fake enumeration failure")
        return list(self.monitors)


class FakeCapturePort(CapturePort):
    """Serves a preset frame per monitor id, or a black frame of the monitor's size."""

    def __init__(
        self,
        frames: Mapping[int, Frame] | None = None,
        failing: set[int] | None = None,
    ) -> None:
        self.frames = dict(frames or {})
        self.failing = set(failing or ())
        self.captured: list[int] = []

    def capture(self, monitor: Monitor) -> Frame:
        self.captured.append(monitor.id)
        if monitor.id in self.failing:
            raise CaptureError(f"fake capture failure on {monitor.id}")
        if monitor.id in self.frames:
            return self.frames[monitor.id]
        return solid_frame(monitor.width, monitor.height)

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, Final

import mss
from domain.errors import CaptureError, EnumerationError
from mss.exception import ScreenShotError
from ports.vision import CapturePort, Frame, Monitor, MonitorPort

LOG: Final = logging.getLogger("qrsnap.capture.mss")

Rect = Mapping[str, int]  # {"left": int, "top": int, "width": int, "height": int}


def monitor_from_rect(idx: int, rect: Rect) -> Monitor:
    return Monitor(
        id=idx,
        x=int(rect["left"]),
        y=int(rect["top"]),
        width=int(rect["width"]),
        height=int(rect["height"]),
        name=f"monitor-{idx}",
    )


class MSSCapture(MonitorPort, CapturePort):
    """Monitor enumeration and full-monitor grabs through mss.

    mss handles are not shareable across threads, so each thread lazily
    opens its own.
    """

    def __init__(self) -> None:
        self._local = threading.local()
        self._handles: list[Any] = []
        self._lock = threading.Lock()

    def _sct(self) -> Any:
        sct = getattr(self._local, "sct", None)
        if sct is None:
            sct = mss.mss()
            self._local.sct = sct
            with self._lock:
                self._handles.append(sct)
        return sct

    def list_monitors(self) -> list[Monitor]:
        try:
            rects = list(self._sct().monitors)
        except ScreenShotError as e:
            raise EnumerationError(f"mss could not enumerate monitors: {e}") from e
        # monitors[0] is the union of all screens
        return [monitor_from_rect(i, r) for i, r in enumerate(rects) if i >= 1]

    def _grab_rect(self, rect: Rect) -> Frame:
        shot: Any = self._sct().grab(dict(rect))
        # Prefer BGRA if available; fall back to raw
        if hasattr(shot, "bgra"):
            bgra_bytes = bytes(shot.bgra)
        else:
            bgra_bytes = bytes(shot.raw)
        return Frame(width=shot.width, height=shot.height, bgra=bgra_bytes)

    def capture(self, monitor: Monitor) -> Frame:
        rect: dict[str, int] = {
            "left": monitor.x,
            "top": monitor.y,
            "width": monitor.width,
            "height": monitor.height,
        }
        try:
            frame = self._grab_rect(rect)
        except ScreenShotError as e:
            raise CaptureError(f"mss grab of monitor {monitor.id} failed: {e}") from e
        LOG.debug("captured monitor %s: %dx%d", monitor.id, frame.width, frame.height)
        return frame

    def close(self) -> None:
        with self._lock:
            handles, self._handles = self._handles, []
        for sct in handles:
            try:
                sct.close()
            except Exception as e:
                LOG.debug("mss close failed: %s", e)
        self._local = threading.local()

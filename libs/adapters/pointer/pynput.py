from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Any, Final

from pynput import mouse
from ports.input import PointerPort, PointerSample

LOG: Final = logging.getLogger("qrsnap.pointer")


class PynputPointer(PointerPort):
    """Pointer state from pynput.

    The listener thread queues button edges so a click shorter than one poll
    interval is still seen; with no pending edge, poll() reports the live
    cursor position and the last known button state.
    """

    def __init__(self, button: Any = mouse.Button.left) -> None:
        self._button = button
        self._ctl = mouse.Controller()
        self._lock = threading.Lock()
        self._edges: deque[PointerSample] = deque()
        self._pressed = False
        self._listener = mouse.Listener(on_click=self._on_click)
        self._listener.start()

    def _on_click(self, x: float, y: float, button: Any, pressed: bool, *_: Any) -> None:
        if button != self._button:
            return
        with self._lock:
            self._pressed = pressed
            self._edges.append(PointerSample(int(x), int(y), pressed))

    def poll(self) -> PointerSample:
        with self._lock:
            if self._edges:
                return self._edges.popleft()
            pressed = self._pressed
        x, y = self._ctl.position
        return PointerSample(int(x), int(y), pressed)

    def close(self) -> None:
        try:
            self._listener.stop()
        except Exception as e:
            LOG.debug("pointer listener stop failed: %s", e)

# libs/domain/selection/service.py
from __future__ import annotations

import logging
from typing import Final

from ports.input import CancelToken, PointerPort
from ports.time import ClockPort, SleeperPort

from .model import GestureState, SelectionGesture, advance

LOG: Final = logging.getLogger("qrsnap.selection")


class SelectionService:
    """Blocks until the user finishes a click-and-drag, a timeout, or a cancel."""

    def __init__(
        self,
        pointer: PointerPort,
        clock: ClockPort,
        sleep: SleeperPort,
        poll_interval_s: float = 0.005,
        timeout_s: float | None = None,
    ) -> None:
        self.pointer: Final = pointer
        self.clock: Final = clock
        self.sleep: Final = sleep
        self._interval = max(0.0, poll_interval_s)
        self._timeout = timeout_s if timeout_s and timeout_s > 0 else None

    def wait_for_selection(self, cancel: CancelToken | None = None) -> SelectionGesture:
        gesture = SelectionGesture()
        deadline = None if self._timeout is None else self.clock.now() + self._timeout
        LOG.debug("waiting for selection (timeout=%s)", self._timeout)
        while not gesture.done:
            if cancel is not None and cancel.is_set():
                LOG.info("selection aborted")
                return gesture.cancel()
            if deadline is not None and self.clock.now() >= deadline:
                LOG.info("selection timed out after %.1fs", self._timeout)
                return gesture.cancel()

            before = gesture.state
            gesture = advance(gesture, self.pointer.poll())
            if gesture.state is not before:
                LOG.debug("gesture %s -> %s", before.value, gesture.state.value)
            if gesture.state is not GestureState.COMPLETE:
                self.sleep.sleep(self._interval)
        LOG.debug("selection %s -> %s", gesture.start, gesture.end)
        return gesture

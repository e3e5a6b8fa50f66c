# libs/domain/scan/service.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Final

from ports.input import CancelToken
from ports.telemetry import MetricsPort
from ports.time import ClockPort
from ports.vision import CapturePort, Frame, Monitor, MonitorPort
from shared.contracts.v1.scan import ScanMode, ScanReport

from domain.capture import crop_frame, resolve_monitor, to_local_box
from domain.decode import DecodeService
from domain.errors import CaptureError, EnumerationError, QrSnapError
from domain.selection import SelectionService

LOG: Final = logging.getLogger("qrsnap.scan")


class ScanService:
    """Selection -> monitor -> crop -> decode, and the all-monitors variant.

    Every QrSnapError ends the attempt with an empty report; nothing is retried.
    """

    def __init__(
        self,
        monitors: MonitorPort,
        capture: CapturePort,
        decode: DecodeService,
        clock: ClockPort,
        selection: SelectionService | None = None,
        metrics: MetricsPort | None = None,
        parallel_capture: bool = False,
    ) -> None:
        self.monitors: Final = monitors
        self.capture: Final = capture
        self.decode: Final = decode
        self.clock: Final = clock
        self.selection: Final = selection
        self.metrics: Final = metrics
        self._parallel = parallel_capture

    # --- public API -----------------------------------------------------------

    def scan_selection(self, cancel: CancelToken | None = None) -> ScanReport:
        if self.selection is None:
            raise RuntimeError("scan_selection needs a SelectionService")
        t0 = self.clock.now()
        monitor: Monitor | None = None
        try:
            gesture = self.selection.wait_for_selection(cancel)
            selection = gesture.to_box()
            monitor = resolve_monitor(selection, self._list_monitors())
            local = to_local_box(selection, monitor)
            LOG.info(
                "selection %s-%s on monitor %s, local %s-%s",
                selection.top_left,
                selection.bottom_right,
                monitor.id,
                local.top_left,
                local.bottom_right,
            )
            frame = crop_frame(self.capture.capture(monitor), local)
            payloads = self.decode.decode_all([frame])
        except QrSnapError as e:
            LOG.warning("selection scan failed: %s: %s", type(e).__name__, e)
            return self._report("select", [], t0, monitor=monitor, error=e)
        return self._report("select", payloads, t0, monitor=monitor)

    def scan_all_monitors(self) -> ScanReport:
        t0 = self.clock.now()
        try:
            monitors = self._list_monitors()
        except EnumerationError as e:
            LOG.warning("monitor enumeration failed: %s", e)
            return self._report("all", [], t0, error=e)
        frames = self._capture_all(monitors)
        return self._report("all", self.decode.decode_all(frames), t0)

    # --- helpers --------------------------------------------------------------

    def _list_monitors(self) -> list[Monitor]:
        monitors = self.monitors.list_monitors()
        LOG.debug("monitors: %s", [(m.id, m.x, m.y, m.width, m.height) for m in monitors])
        return monitors

    def _capture_one(self, monitor: Monitor) -> Frame | None:
        try:
            return self.capture.capture(monitor)
        except CaptureError as e:
            LOG.warning("capture of monitor %s failed: %s", monitor.id, e)
            return None

    def _capture_all(self, monitors: list[Monitor]) -> list[Frame]:
        if self._parallel and len(monitors) > 1:
            # map() keeps monitor order
            with ThreadPoolExecutor(max_workers=len(monitors), thread_name_prefix="capture") as ex:
                grabbed = list(ex.map(self._capture_one, monitors))
        else:
            grabbed = [self._capture_one(m) for m in monitors]
        return [f for f in grabbed if f is not None]

    def _report(
        self,
        mode: ScanMode,
        payloads: list[str],
        t0: float,
        monitor: Monitor | None = None,
        error: Exception | None = None,
    ) -> ScanReport:
        now = self.clock.now()
        if self.metrics is not None:
            self.metrics.observe("scan_ms", (now - t0) * 1000.0, mode=mode)
            self.metrics.observe("qr_found", float(len(payloads)), mode=mode)
        return ScanReport(
            mode=mode,
            monitor=monitor.id if monitor is not None else None,
            payloads=payloads,
            ts=now,
            error=type(error).__name__ if error is not None else None,
        )

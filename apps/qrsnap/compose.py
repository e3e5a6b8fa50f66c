from __future__ import annotations

from dataclasses import dataclass, field

from adapters.telemetry import LoggingMetricsPort
from adapters.time import SystemClockPort, SystemSleeperPort
from domain.decode import DecodeService
from domain.scan import ScanService
from domain.selection import SelectionService
from ports.input import PointerPort
from ports.output import ClipboardPort, NotifierPort
from ports.telemetry import MetricsPort
from ports.time import ClockPort, SleeperPort
from ports.vision import CapturePort, DecoderPort, MonitorPort

from apps.qrsnap.settings import QrSnapSettings


@dataclass
class QrSnapApp:
    scanner: ScanService
    sleeper: SleeperPort
    clipboard: ClipboardPort | None = None
    notifier: NotifierPort | None = None
    closers: list[object] = field(default_factory=list)

    def close(self) -> None:
        for c in self.closers:
            close = getattr(c, "close", None)
            if callable(close):
                close()


def build_capture(settings: QrSnapSettings) -> tuple[MonitorPort, CapturePort]:
    if settings.capture.adapter == "mss":
        from adapters.mss_capture.mss import MSSCapture

        cap = MSSCapture()
        return cap, cap
    raise ValueError(f"Unknown capture adapter: {settings.capture.adapter}")


def build_decoder(settings: QrSnapSettings) -> DecoderPort:
    if settings.decoder.adapter == "opencv":
        from adapters.qr_opencv.opencv import OpenCVQrDecoder

        return OpenCVQrDecoder()
    raise ValueError(f"Unknown decoder adapter: {settings.decoder.adapter}")


def build_pointer() -> PointerPort:
    from adapters.pointer.pynput import PynputPointer

    return PynputPointer()


def build_clipboard() -> ClipboardPort:
    from adapters.desktop.clipboard import PyperclipClipboard

    return PyperclipClipboard()


def build_notifier() -> NotifierPort:
    from adapters.desktop.notify import NotifySendNotifier

    return NotifySendNotifier()


def build_app(
    settings: QrSnapSettings,
    select: bool,
    *,
    monitors: MonitorPort | None = None,
    capture: CapturePort | None = None,
    decoder: DecoderPort | None = None,
    pointer: PointerPort | None = None,
    clock: ClockPort | None = None,
    sleeper: SleeperPort | None = None,
    metrics: MetricsPort | None = None,
    clipboard: ClipboardPort | None = None,
    notifier: NotifierPort | None = None,
) -> QrSnapApp:
    """Wire ports to adapters; any port passed in explicitly wins."""
    if monitors is None or capture is None:
        built_monitors, built_capture = build_capture(settings)
        monitors = monitors or built_monitors
        capture = capture or built_capture
    decoder = decoder or build_decoder(settings)
    clock = clock or SystemClockPort()
    sleeper = sleeper or SystemSleeperPort()
    metrics = metrics or LoggingMetricsPort()
    # sinks follow the output settings even when one is passed in
    clipboard = (clipboard or build_clipboard()) if settings.output.clipboard else None
    notifier = (notifier or build_notifier()) if settings.output.notify else None

    selection: SelectionService | None = None
    if select:
        pointer = pointer or build_pointer()
        selection = SelectionService(
            pointer=pointer,
            clock=clock,
            sleep=sleeper,
            poll_interval_s=settings.selection.poll_ms / 1000.0,
            timeout_s=settings.selection.timeout_s,
        )

    scanner = ScanService(
        monitors=monitors,
        capture=capture,
        decode=DecodeService(decoder),
        clock=clock,
        selection=selection,
        metrics=metrics,
        parallel_capture=settings.capture.parallel,
    )
    return QrSnapApp(
        scanner=scanner,
        sleeper=sleeper,
        clipboard=clipboard,
        notifier=notifier,
        closers=[p for p in (pointer, capture) if p is not None],
    )

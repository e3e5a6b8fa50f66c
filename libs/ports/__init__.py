from .input import CancelToken, PointerPort, PointerSample
from .output import ClipboardPort, NotifierPort
from .telemetry import MetricsPort
from .time import ClockPort, SleeperPort
from .vision import CapturePort, DecoderPort, Frame, LumaImage, Monitor, MonitorPort

__all__ = [
    "PointerPort",
    "PointerSample",
    "CancelToken",
    "MonitorPort",
    "CapturePort",
    "DecoderPort",
    "Frame",
    "LumaImage",
    "Monitor",
    "ClipboardPort",
    "NotifierPort",
    "MetricsPort",
    "ClockPort",
    "SleeperPort",
]

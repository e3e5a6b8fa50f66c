from .fakes import FakeCapturePort, FakeMonitorPort, solid_frame

__all__ = ["FakeCapturePort", "FakeMonitorPort", "solid_frame"]

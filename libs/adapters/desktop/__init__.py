from .fakes import FakeClipboardPort, FakeNotifierPort

__all__ = ["FakeClipboardPort", "FakeNotifierPort"]

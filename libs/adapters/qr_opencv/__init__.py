from .fakes import FakeDecoderPort

__all__ = ["FakeDecoderPort"]

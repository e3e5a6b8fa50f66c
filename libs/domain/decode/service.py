# libs/domain/decode/service.py
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final

from PIL import Image
from ports.vision import DecoderPort, Frame, LumaImage

from domain.errors import DecodeSkipped

LOG: Final = logging.getLogger("qrsnap.decode")


def to_luma(frame: Frame) -> LumaImage:
    """BGRA frame -> single-channel intensity (ITU-R 601-2 luma via Pillow)."""
    rgb = Image.frombytes("RGB", frame.size(), frame.bgra, "raw", "BGRX")
    gray = rgb.convert("L")
    return LumaImage(width=gray.width, height=gray.height, pixels=gray.tobytes())


class DecodeService:
    """Runs detect + decode over frames; per-grid failures are dropped, not raised."""

    def __init__(self, decoder: DecoderPort) -> None:
        self.decoder: Final = decoder

    def decode_frame(self, frame: Frame) -> list[str]:
        if frame.width <= 0 or frame.height <= 0:
            return []
        grids = self.decoder.detect_grids(to_luma(frame))
        out: list[str] = []
        for idx, grid in enumerate(grids):
            try:
                text = self.decoder.decode(grid)
            except DecodeSkipped as e:
                LOG.debug("grid %d skipped: %s", idx, e)
                continue
            if text:
                out.append(text)
        return out

    def decode_all(self, frames: Iterable[Frame]) -> list[str]:
        payloads: list[str] = []
        for n, frame in enumerate(frames):
            try:
                found = self.decode_frame(frame)
            except (ValueError, OSError) as e:
                # Pillow rejects short or malformed buffers with ValueError
                LOG.warning("frame %d unreadable: %s", n, e)
                continue
            LOG.debug("frame %d (%dx%d): %d payload(s)", n, frame.width, frame.height, len(found))
            payloads.extend(found)
        return payloads

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Final

import cv2
import numpy as np
from domain.errors import DecodeSkipped
from ports.vision import DecoderPort, LumaImage

LOG: Final = logging.getLogger("qrsnap.decoder.opencv")


@dataclass(frozen=True, eq=False)
class QrGrid:
    image: Any  # uint8 ndarray (h, w), shared by every grid of one frame
    corners: Any  # float32 ndarray (1, 4, 2), as detect() returns it


class OpenCVQrDecoder(DecoderPort):
    def __init__(self) -> None:
        self._detector = cv2.QRCodeDetector()

    def detect_grids(self, image: LumaImage) -> Sequence[QrGrid]:
        gray = np.frombuffer(image.pixels, dtype=np.uint8).reshape(image.height, image.width).copy()
        try:
            ok, points = self._detector.detectMulti(gray)
            if not ok or points is None:
                # detectMulti misses some lone codes that detect() finds
                ok, points = self._detector.detect(gray)
        except cv2.error as e:
            LOG.debug("grid detection failed: %s", e)
            return []
        if not ok or points is None:
            return []
        quads = np.asarray(points, dtype=np.float32).reshape(-1, 4, 2)
        return [QrGrid(image=gray, corners=q.reshape(1, 4, 2)) for q in quads]

    def decode(self, grid: QrGrid) -> str:
        try:
            text, _straight = self._detector.decode(grid.image, grid.corners)
        except cv2.error as e:
            raise DecodeSkipped(f"opencv decode error: {e}") from e
        if not text:
            raise DecodeSkipped("grid located but payload unreadable")
        return text

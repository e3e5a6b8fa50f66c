# tests/ports_contracts/test_decoder_opencv_contract.py
import importlib.util

import pytest

cv2_available = importlib.util.find_spec("cv2") is not None

pytestmark = [
    pytest.mark.contract,
    pytest.mark.skipif(not cv2_available, reason="opencv not installed"),
]


def _qr_frame(text: str, scale: int = 8, border: int = 32):
    import cv2
    import numpy as np
    from ports.vision import Frame

    code = cv2.QRCodeEncoder.create().encode(text)
    code = cv2.resize(code, None, fx=scale, fy=scale, interpolation=cv2.INTER_NEAREST)
    gray = cv2.copyMakeBorder(code, border, border, border, border, cv2.BORDER_CONSTANT, value=255)
    bgra = cv2.cvtColor(gray, cv2.COLOR_GRAY2BGRA)
    h, w = gray.shape
    return Frame(width=w, height=h, bgra=np.ascontiguousarray(bgra).tobytes())


def test_decodes_a_rendered_qr():
    from adapters.qr_opencv.opencv import OpenCVQrDecoder
    from domain.decode import DecodeService

    frame = _qr_frame("https://example.org/qrsnap")
    assert DecodeService(OpenCVQrDecoder()).decode_all([frame]) == ["https://example.org/qrsnap"]


def test_blank_image_has_no_grids():
    from adapters.mss_capture import solid_frame
    from adapters.qr_opencv.opencv import OpenCVQrDecoder
    from domain.decode import DecodeService, to_luma

    frame = solid_frame(64, 64, (255, 255, 255, 255))
    dec = OpenCVQrDecoder()
    assert dec.detect_grids(to_luma(frame)) == []
    assert DecodeService(dec).decode_all([frame]) == []

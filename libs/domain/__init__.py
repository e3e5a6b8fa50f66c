from .errors import (
    CaptureError,
    CropOutOfBounds,
    DecodeSkipped,
    EnumerationError,
    NoMonitorFound,
    OutputError,
    QrSnapError,
    SelectionCancelled,
)
from .types import BoundingBox, Coord

__all__ = [
    "BoundingBox",
    "Coord",
    "QrSnapError",
    "NoMonitorFound",
    "CropOutOfBounds",
    "EnumerationError",
    "CaptureError",
    "SelectionCancelled",
    "DecodeSkipped",
    "OutputError",
]

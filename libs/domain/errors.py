from __future__ import annotations


class QrSnapError(Exception):
    """Base for failures that abort a single scan attempt."""


class NoMonitorFound(QrSnapError):
    pass


class CropOutOfBounds(QrSnapError):
    pass


class EnumerationError(QrSnapError):
    """Monitor list unavailable."""


class CaptureError(QrSnapError):
    pass


class SelectionCancelled(QrSnapError):
    """Gesture timed out or was aborted before the button came back up."""


class DecodeSkipped(QrSnapError):
    """One grid could not be decoded; never escalates past the pipeline."""


class OutputError(QrSnapError):
    """Clipboard or notification sink failed; logged by the caller, never fatal."""

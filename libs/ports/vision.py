# libs/ports/vision.py
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class Frame:
    width: int
    height: int
    # raw BGRA bytes (row-major). Keep it tech-agnostic.
    bgra: bytes

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def stride(self) -> int:
        return self.width * BYTES_PER_PIXEL


@dataclass(frozen=True)
class LumaImage:
    width: int
    height: int
    # one intensity byte per pixel, row-major
    pixels: bytes


@dataclass(frozen=True)
class Monitor:
    """Display descriptor in virtual-desktop pixels, as the provider reports it."""

    id: int
    x: int
    y: int
    width: int
    height: int
    name: str = ""


class MonitorPort(ABC):
    """Enumerates physical displays in provider order."""

    @abstractmethod
    def list_monitors(self) -> list[Monitor]: ...


class CapturePort(ABC):
    """Grabs one full monitor frame."""

    @abstractmethod
    def capture(self, monitor: Monitor) -> Frame: ...

    def close(self) -> None:  # noqa: B027 - optional hook
        return None


# A grid is whatever the decoder located; the domain only hands it back.
Grid = Any


class DecoderPort(ABC):
    @abstractmethod
    def detect_grids(self, image: LumaImage) -> Sequence[Grid]: ...

    @abstractmethod
    def decode(self, grid: Grid) -> str:
        """Decode one grid; raises ``DecodeSkipped`` when it cannot."""

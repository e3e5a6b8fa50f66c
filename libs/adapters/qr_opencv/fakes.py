from __future__ import annotations

from collections.abc import Mapping, Sequence

from domain.errors import DecodeSkipped
from ports.vision import DecoderPort, LumaImage


class FakeDecoderPort(DecoderPort):
    """Grids keyed by image size; a ``None`` grid fails to decode."""

    def __init__(self, grids: Mapping[tuple[int, int], Sequence[str | None]] | None = None) -> None:
        self.grids = {k: list(v) for k, v in (grids or {}).items()}
        self.seen: list[LumaImage] = []

    def detect_grids(self, image: LumaImage) -> Sequence[str | None]:
        self.seen.append(image)
        return self.grids.get((image.width, image.height), [])

    def decode(self, grid: str | None) -> str:
        if grid is None:
            raise DecodeSkipped("fake undecodable grid")
        return grid

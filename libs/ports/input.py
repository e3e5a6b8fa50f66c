from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class PointerSample:
    x: int
    y: int
    primary_pressed: bool


class PointerPort(ABC):
    """Live pointer state; domain never sees the OS hook directly."""

    @abstractmethod
    def poll(self) -> PointerSample: ...

    def close(self) -> None:  # noqa: B027 - optional hook
        return None


class CancelToken(Protocol):
    """Anything with ``is_set()``; ``threading.Event`` qualifies."""

    def is_set(self) -> bool: ...

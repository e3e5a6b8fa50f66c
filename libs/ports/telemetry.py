from __future__ import annotations

from abc import ABC, abstractmethod


class MetricsPort(ABC):
    @abstractmethod
    def observe(self, name: str, value: float, **labels: str) -> None: ...

from __future__ import annotations

from abc import ABC, abstractmethod


class ClipboardPort(ABC):
    @abstractmethod
    def copy(self, text: str) -> None: ...


class NotifierPort(ABC):
    """Desktop notification sink."""

    @abstractmethod
    def notify(self, summary: str, body: str) -> None: ...

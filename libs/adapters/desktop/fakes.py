from __future__ import annotations

from domain.errors import OutputError
from ports.output import ClipboardPort, NotifierPort


class FakeClipboardPort(ClipboardPort):
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.contents: list[str] = []

    def copy(self, text: str) -> None:
        if self.fail:
            raise OutputError("fake clipboard failure")
        self.contents.append(text)


class FakeNotifierPort(NotifierPort):
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[tuple[str, str]] = []

    def notify(self, summary: str, body: str) -> None:
        if self.fail:
            raise OutputError("fake notifier failure")
        self.sent.append((summary, body))

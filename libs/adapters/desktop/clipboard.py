from __future__ import annotations

import pyperclip
from domain.errors import OutputError
from ports.output import ClipboardPort


class PyperclipClipboard(ClipboardPort):
    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise OutputError(f"clipboard unavailable: {e}") from e

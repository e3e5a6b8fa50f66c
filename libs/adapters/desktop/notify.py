from __future__ import annotations

import shutil
import subprocess

from domain.errors import OutputError
from ports.output import NotifierPort


class NotifySendNotifier(NotifierPort):
    """freedesktop notifications through the ``notify-send`` binary."""

    def __init__(self, app_name: str = "qrsnap", timeout_s: float = 5.0) -> None:
        self.app_name = app_name
        self.timeout_s = timeout_s

    def notify(self, summary: str, body: str) -> None:
        exe = shutil.which("notify-send")
        if exe is None:
            raise OutputError("notify-send not found on PATH")
        try:
            subprocess.run(
                [exe, "--app-name", self.app_name, summary, body],
                check=True,
                timeout=self.timeout_s,
                capture_output=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise OutputError(f"notification failed: {e}") from e

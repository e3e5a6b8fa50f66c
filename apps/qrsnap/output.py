from __future__ import annotations

import logging
from typing import Final

from domain.errors import OutputError
from ports.output import ClipboardPort, NotifierPort
from ports.time import SleeperPort
from shared.contracts.v1.scan import ScanReport

LOG: Final = logging.getLogger("qrsnap.output")

SUMMARY = "qrsnap"


def notify(report: ScanReport, notifier: NotifierPort) -> bool:
    try:
        notifier.notify(SUMMARY, f"QR: {report.joined()}")
    except OutputError as e:
        LOG.warning("Failed to send notification: %s", e)
        return False
    return True


def copy_to_clipboard(
    report: ScanReport,
    clipboard: ClipboardPort,
    sleeper: SleeperPort | None = None,
    hold_s: float = 0.0,
) -> bool:
    LOG.info("setting clipboard: %s", report.payloads)
    try:
        clipboard.copy(report.joined())
    except OutputError as e:
        LOG.warning("Failed to set clipboard: %s", e)
        return False
    if hold_s > 0 and sleeper is not None:
        sleeper.sleep(hold_s)
    return True


def render(report: ScanReport, as_json: bool = False) -> str:
    if as_json:
        return report.model_dump_json()
    return report.joined()

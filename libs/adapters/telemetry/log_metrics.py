from __future__ import annotations

import logging
from typing import Final

from ports.telemetry import MetricsPort

LOG: Final = logging.getLogger("qrsnap.metrics")


class LoggingMetricsPort(MetricsPort):
    """Metrics as debug log lines; there is no collector to ship them to."""

    def observe(self, name: str, value: float, **labels: str) -> None:
        tags = " ".join(f"{k}={v}" for k, v in sorted(labels.items()))
        LOG.debug("%s=%.3f %s", name, value, tags)

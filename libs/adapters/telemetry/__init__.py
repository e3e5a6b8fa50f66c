from .fakes import FakeMetricsPort
from .log_metrics import LoggingMetricsPort

__all__ = ["FakeMetricsPort", "LoggingMetricsPort"]

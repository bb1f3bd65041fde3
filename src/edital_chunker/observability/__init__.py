from . import names
from .base import InMemoryMetricsHook, MetricEvent, MetricsHook, NoOpMetricsHook

__all__ = [
    "InMemoryMetricsHook",
    "MetricEvent",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]

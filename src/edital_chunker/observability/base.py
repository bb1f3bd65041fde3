# src/edital_chunker/observability/base.py

from dataclasses import dataclass, field
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for chunking and extraction metrics.

    Implementations forward to whatever backend the caller runs
    (Prometheus, StatsD, logs). The library never configures one.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


@dataclass(frozen=True)
class MetricEvent:
    kind: str
    name: str
    value: float
    labels: dict[str, str] = field(default_factory=dict)


class InMemoryMetricsHook:
    """Keeps every recorded metric in a list.

    Handy for diagnostics scripts and for asserting on metrics in tests.
    """

    def __init__(self) -> None:
        self.events: list[MetricEvent] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.events.append(MetricEvent("latency", name, value_ms, dict(labels or {})))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.events.append(MetricEvent("counter", name, value, dict(labels or {})))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.events.append(MetricEvent("gauge", name, value, dict(labels or {})))

    def named(self, name: str) -> list[MetricEvent]:
        return [event for event in self.events if event.name == name]

    def total(self, name: str) -> float:
        return sum(event.value for event in self.named(name))

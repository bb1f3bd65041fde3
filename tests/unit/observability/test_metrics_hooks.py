from edital_chunker.observability import InMemoryMetricsHook, MetricEvent, NoOpMetricsHook


class TestInMemoryMetricsHook:
    def test_records_every_kind(self) -> None:
        hook = InMemoryMetricsHook()

        hook.record_latency("op.duration", 12.5, labels={"strategy": "title"})
        hook.increment("op.total")
        hook.record_gauge("op.size", 3.0)

        assert hook.events == [
            MetricEvent("latency", "op.duration", 12.5, {"strategy": "title"}),
            MetricEvent("counter", "op.total", 1, {}),
            MetricEvent("gauge", "op.size", 3.0, {}),
        ]

    def test_named_and_total(self) -> None:
        hook = InMemoryMetricsHook()

        hook.increment("chunks", 4)
        hook.increment("chunks", 3)
        hook.increment("other")

        assert len(hook.named("chunks")) == 2
        assert hook.total("chunks") == 7
        assert hook.total("missing") == 0

    def test_labels_are_copied(self) -> None:
        hook = InMemoryMetricsHook()
        labels = {"strategy": "title"}

        hook.increment("docs", labels=labels)
        labels["strategy"] = "semantic"

        assert hook.events[0].labels == {"strategy": "title"}


def test_noop_hook_accepts_calls() -> None:
    hook = NoOpMetricsHook()

    hook.record_latency("op.duration", 1.0)
    hook.increment("op.total", labels={"a": "b"})
    hook.record_gauge("op.size", 2.0)

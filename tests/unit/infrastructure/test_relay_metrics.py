"""Unit tests for RelayMetrics."""

from prometheus_client import CollectorRegistry

from connect_relay.infrastructure.monitoring.metrics import RelayMetrics


class TestRelayMetrics:
    def test_counts_emitted_records_by_type(self) -> None:
        registry = CollectorRegistry()
        metrics = RelayMetrics(registry=registry)

        metrics.record_emitted("relay.connection.requested")
        metrics.record_emitted("relay.connection.requested")

        value = registry.get_sample_value(
            "relay_records_emitted_total",
            {
                "environment": metrics._environment,
                "record_type": "relay.connection.requested",
            },
        )
        assert value == 2.0

    def test_counts_rejections_by_operation_and_error(self) -> None:
        registry = CollectorRegistry()
        metrics = RelayMetrics(registry=registry)

        metrics.record_rejection("withdraw_tokens", "OperationPausedError")

        value = registry.get_sample_value(
            "relay_operations_rejected_total",
            {
                "environment": metrics._environment,
                "operation": "withdraw_tokens",
                "error": "OperationPausedError",
            },
        )
        assert value == 1.0

    def test_separate_registries_do_not_collide(self) -> None:
        first = RelayMetrics(registry=CollectorRegistry())
        second = RelayMetrics(registry=CollectorRegistry())

        first.record_emitted("relay.fee.amount_changed")

        assert b"relay.fee.amount_changed" not in second.generate_metrics()
        assert first.registry is not second.registry

    def test_environment_label_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        metrics = RelayMetrics(registry=CollectorRegistry())

        metrics.record_emitted("relay.access.admin_added")

        assert b'environment="production"' in metrics.generate_metrics()

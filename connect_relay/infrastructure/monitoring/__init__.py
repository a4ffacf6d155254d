"""Prometheus monitoring for the relay."""

from connect_relay.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    RelayMetrics,
)

__all__: list[str] = ["METRICS_CONTENT_TYPE", "RelayMetrics"]

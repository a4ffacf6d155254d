"""Prometheus metrics for relay operations.

Counts emitted records by type and rejected operations by error class.
Counters live on an injectable CollectorRegistry so that tests and
multiple relays do not collide in the global registry.
"""

import os

from prometheus_client import CollectorRegistry, Counter, generate_latest

# Content type for Prometheus metrics endpoint
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


class RelayMetrics:
    """Collects relay operation metrics.

    Attributes:
        records_emitted_total: Counter of emitted records by record type.
        operations_rejected_total: Counter of rejected calls by operation
            and error class.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize relay counters.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")

        self.records_emitted_total = Counter(
            name="relay_records_emitted_total",
            documentation="Total records emitted by the relay",
            labelnames=["environment", "record_type"],
            registry=self._registry,
        )

        self.operations_rejected_total = Counter(
            name="relay_operations_rejected_total",
            documentation="Total relay calls rejected before commit",
            labelnames=["environment", "operation", "error"],
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    def record_emitted(self, record_type: str) -> None:
        """Count one emitted record.

        Args:
            record_type: Dotted record type name.
        """
        self.records_emitted_total.labels(
            environment=self._environment, record_type=record_type
        ).inc()

    def record_rejection(self, operation: str, error: str) -> None:
        """Count one rejected call.

        Args:
            operation: Relay operation name.
            error: Error class name.
        """
        self.operations_rejected_total.labels(
            environment=self._environment, operation=operation, error=error
        ).inc()

    def generate_metrics(self) -> bytes:
        """Render the registry in Prometheus exposition format."""
        return generate_latest(self._registry)

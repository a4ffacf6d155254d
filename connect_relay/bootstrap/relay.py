"""Bootstrap wiring for a development relay.

Builds a ConnectionRelay over in-memory stubs: a token gateway holding the
configured fee token, an in-memory record publisher and the system clock.
A production deployment replaces the stubs with real adapters.
"""

from __future__ import annotations

from dataclasses import dataclass

from prometheus_client import CollectorRegistry

from connect_relay.application.ports.time_authority import TimeAuthorityProtocol
from connect_relay.application.services.connection_relay import ConnectionRelay
from connect_relay.config.relay_config import RelayConfig
from connect_relay.domain.models.relay_state import RelayState
from connect_relay.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)
from connect_relay.infrastructure.monitoring.metrics import RelayMetrics
from connect_relay.infrastructure.stubs.record_publisher_stub import (
    RecordPublisherStub,
)
from connect_relay.infrastructure.stubs.token_gateway_stub import TokenGatewayStub


@dataclass
class RelayContainer:
    """A wired relay together with the adapters it was built on."""

    relay: ConnectionRelay
    token_gateway: TokenGatewayStub
    publisher: RecordPublisherStub
    metrics: RelayMetrics


def build_relay(
    config: RelayConfig,
    time_authority: TimeAuthorityProtocol | None = None,
    registry: CollectorRegistry | None = None,
) -> RelayContainer:
    """Build a relay in its initial state.

    The configured deployer becomes owner and only admin; the configured
    fee token is registered with the gateway.

    Args:
        config: Relay configuration.
        time_authority: Clock override (defaults to SystemTimeAuthority).
        registry: Prometheus registry override.

    Returns:
        RelayContainer with the relay and its stubs.
    """
    token_gateway = TokenGatewayStub()
    token_gateway.create(config.default_fee_token)
    publisher = RecordPublisherStub()
    metrics = RelayMetrics(registry=registry)

    relay = ConnectionRelay(
        state=RelayState.initial(
            deployer=config.deployer_address,
            fee_token=config.default_fee_token,
            fee_amount=config.default_fee_amount,
        ),
        relay_address=config.relay_address,
        token_gateway=token_gateway,
        publisher=publisher,
        time_authority=time_authority or SystemTimeAuthority(),
        metrics=metrics,
    )
    return RelayContainer(
        relay=relay,
        token_gateway=token_gateway,
        publisher=publisher,
        metrics=metrics,
    )

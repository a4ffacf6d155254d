"""
Pytest configuration and shared fixtures for Connect Relay tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Relays are built over in-memory stubs and a FakeTimeAuthority
- Unit tests go in tests/unit/
"""

import pytest
from prometheus_client import CollectorRegistry

from connect_relay.application.services.connection_relay import ConnectionRelay
from connect_relay.domain.models.relay_state import DEFAULT_FEE_TOKEN, RelayState
from connect_relay.infrastructure.monitoring.metrics import RelayMetrics
from connect_relay.infrastructure.stubs.record_publisher_stub import (
    RecordPublisherStub,
)
from connect_relay.infrastructure.stubs.token_gateway_stub import TokenGatewayStub
from connect_relay.infrastructure.stubs.token_ledger_stub import TokenLedgerStub
from tests.helpers.addresses import BOB, OTHER_TOKEN, OWNER, RELAY_ADDRESS
from tests.helpers.fake_time_authority import FakeTimeAuthority


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from connect_relay import __version__

    return __version__


@pytest.fixture
def fake_time() -> FakeTimeAuthority:
    return FakeTimeAuthority()


@pytest.fixture
def publisher() -> RecordPublisherStub:
    return RecordPublisherStub()


@pytest.fixture
def fee_ledger() -> TokenLedgerStub:
    """The default fee token, with BOB holding 100 tokens."""
    ledger = TokenLedgerStub(DEFAULT_FEE_TOKEN)
    ledger.mint(BOB, 100 * 10**18)
    return ledger


@pytest.fixture
def other_ledger() -> TokenLedgerStub:
    return TokenLedgerStub(OTHER_TOKEN)


@pytest.fixture
def gateway(
    fee_ledger: TokenLedgerStub, other_ledger: TokenLedgerStub
) -> TokenGatewayStub:
    return TokenGatewayStub(fee_ledger, other_ledger)


@pytest.fixture
def metrics() -> RelayMetrics:
    return RelayMetrics(registry=CollectorRegistry())


@pytest.fixture
def relay(
    gateway: TokenGatewayStub,
    publisher: RecordPublisherStub,
    fake_time: FakeTimeAuthority,
    metrics: RelayMetrics,
) -> ConnectionRelay:
    """A freshly deployed relay owned by OWNER with default parameters."""
    return ConnectionRelay(
        state=RelayState.initial(OWNER),
        relay_address=RELAY_ADDRESS,
        token_gateway=gateway,
        publisher=publisher,
        time_authority=fake_time,
        metrics=metrics,
    )

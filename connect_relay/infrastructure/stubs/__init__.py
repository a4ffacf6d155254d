"""In-memory stub implementations of the relay ports.

Used for development wiring and in unit tests.
"""

from connect_relay.infrastructure.stubs.record_publisher_stub import (
    RecordPublisherStub,
)
from connect_relay.infrastructure.stubs.token_gateway_stub import TokenGatewayStub
from connect_relay.infrastructure.stubs.token_ledger_stub import TokenLedgerStub

__all__: list[str] = ["RecordPublisherStub", "TokenGatewayStub", "TokenLedgerStub"]

"""Ports (interfaces) the relay services depend on."""

from connect_relay.application.ports.record_publisher import (
    RelayRecordPublisherProtocol,
)
from connect_relay.application.ports.time_authority import TimeAuthorityProtocol
from connect_relay.application.ports.token_ledger import (
    TokenApprovalNotification,
    TokenGatewayProtocol,
    TokenLedgerProtocol,
    TokenTransferNotification,
)

__all__: list[str] = [
    "RelayRecordPublisherProtocol",
    "TimeAuthorityProtocol",
    "TokenApprovalNotification",
    "TokenGatewayProtocol",
    "TokenLedgerProtocol",
    "TokenTransferNotification",
]

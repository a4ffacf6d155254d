"""
Relay records.

Every record is an immutable, timestamped audit entry that is broadcast
to observers when an operation succeeds. Records are never stored by the
relay itself.
"""

from connect_relay.domain.events.access import (
    ADMIN_ADDED_EVENT_TYPE,
    ADMIN_REMOVED_EVENT_TYPE,
    ADMIN_RESIGNED_EVENT_TYPE,
    OWNERSHIP_TRANSFERRED_EVENT_TYPE,
    AdminAddedEvent,
    AdminRemovedEvent,
    AdminResignedEvent,
    OwnershipTransferredEvent,
)
from connect_relay.domain.events.connection import (
    CONNECTION_REQUESTED_EVENT_TYPE,
    CONNECTION_RESPONDED_EVENT_TYPE,
    ConnectionRequestedEvent,
    ConnectionRespondedEvent,
)
from connect_relay.domain.events.custody import (
    TOKENS_WITHDRAWN_EVENT_TYPE,
    TokensWithdrawnEvent,
)
from connect_relay.domain.events.fee import (
    FEE_TOKEN_CHANGED_EVENT_TYPE,
    REQUEST_FEE_CHANGED_EVENT_TYPE,
    FeeTokenChangedEvent,
    RequestFeeChangedEvent,
)
from connect_relay.domain.events.pause import (
    ADMIN_WITHDRAWALS_PAUSE_CHANGED_EVENT_TYPE,
    REQUESTS_PAUSE_CHANGED_EVENT_TYPE,
    RESPONSES_PAUSE_CHANGED_EVENT_TYPE,
    AdminWithdrawalsPauseChangedEvent,
    PauseChangedEvent,
    RequestsPauseChangedEvent,
    ResponsesPauseChangedEvent,
    pause_changed_event_for,
)
from connect_relay.domain.events.record import RelayRecord

__all__: list[str] = [
    "ADMIN_ADDED_EVENT_TYPE",
    "ADMIN_REMOVED_EVENT_TYPE",
    "ADMIN_RESIGNED_EVENT_TYPE",
    "ADMIN_WITHDRAWALS_PAUSE_CHANGED_EVENT_TYPE",
    "CONNECTION_REQUESTED_EVENT_TYPE",
    "CONNECTION_RESPONDED_EVENT_TYPE",
    "FEE_TOKEN_CHANGED_EVENT_TYPE",
    "OWNERSHIP_TRANSFERRED_EVENT_TYPE",
    "REQUESTS_PAUSE_CHANGED_EVENT_TYPE",
    "REQUEST_FEE_CHANGED_EVENT_TYPE",
    "RESPONSES_PAUSE_CHANGED_EVENT_TYPE",
    "TOKENS_WITHDRAWN_EVENT_TYPE",
    "AdminAddedEvent",
    "AdminRemovedEvent",
    "AdminResignedEvent",
    "AdminWithdrawalsPauseChangedEvent",
    "ConnectionRequestedEvent",
    "ConnectionRespondedEvent",
    "FeeTokenChangedEvent",
    "OwnershipTransferredEvent",
    "PauseChangedEvent",
    "RelayRecord",
    "RequestFeeChangedEvent",
    "RequestsPauseChangedEvent",
    "ResponsesPauseChangedEvent",
    "TokensWithdrawnEvent",
    "pause_changed_event_for",
]

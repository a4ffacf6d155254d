"""Fee parameter change records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from connect_relay.domain.events.record import RELAY_RECORD_SCHEMA_VERSION
from connect_relay.domain.value_objects.address import Address

REQUEST_FEE_CHANGED_EVENT_TYPE: str = "relay.fee.amount_changed"

FEE_TOKEN_CHANGED_EVENT_TYPE: str = "relay.fee.token_changed"


@dataclass(frozen=True, eq=True)
class RequestFeeChangedEvent:
    """Record of the per-request fee being set.

    Attributes:
        actor: Admin that set the fee.
        new_fee: New fee in token base units.
        emitted_at: When the record was emitted (UTC).
    """

    event_type: ClassVar[str] = REQUEST_FEE_CHANGED_EVENT_TYPE

    actor: Address
    new_fee: int
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "actor": str(self.actor),
            # String keeps amounts above 2**53 exact for JSON consumers
            "new_fee": str(self.new_fee),
            "emitted_at": self.emitted_at.isoformat(),
            "schema_version": RELAY_RECORD_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class FeeTokenChangedEvent:
    """Record of the fee token being replaced.

    Changing the token changes which external contract the relay trusts
    for fee collection, so both the old and new address are recorded.

    Attributes:
        previous_token: Token address before the change.
        new_token: Token address after the change.
        actor: Owner that made the change.
        emitted_at: When the record was emitted (UTC).
    """

    event_type: ClassVar[str] = FEE_TOKEN_CHANGED_EVENT_TYPE

    previous_token: Address
    new_token: Address
    actor: Address
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "previous_token": str(self.previous_token),
            "new_token": str(self.new_token),
            "actor": str(self.actor),
            "emitted_at": self.emitted_at.isoformat(),
            "schema_version": RELAY_RECORD_SCHEMA_VERSION,
        }

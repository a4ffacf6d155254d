"""Token custody records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from connect_relay.domain.events.record import RELAY_RECORD_SCHEMA_VERSION
from connect_relay.domain.value_objects.address import Address

TOKENS_WITHDRAWN_EVENT_TYPE: str = "relay.custody.tokens_withdrawn"


@dataclass(frozen=True, eq=True)
class TokensWithdrawnEvent:
    """Record of tokens leaving the relay's custody.

    Attributes:
        token: Address of the withdrawn token (not necessarily the fee token).
        actor: Owner or admin that performed the withdrawal.
        amount: Amount withdrawn in base units.
        recipient: Address the tokens were sent to.
        emitted_at: When the record was emitted (UTC).
    """

    event_type: ClassVar[str] = TOKENS_WITHDRAWN_EVENT_TYPE

    token: Address
    actor: Address
    amount: int
    recipient: Address
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "token": str(self.token),
            "actor": str(self.actor),
            "amount": str(self.amount),
            "recipient": str(self.recipient),
            "emitted_at": self.emitted_at.isoformat(),
            "schema_version": RELAY_RECORD_SCHEMA_VERSION,
        }

"""Connection request and response records.

These are the records off-chain clients listen for. Payloads and response
values are opaque: the relay never interprets them. A client correlates
a response with its request by the (sender, recipient) address pair.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from connect_relay.domain.events.record import (
    RELAY_RECORD_SCHEMA_VERSION,
    decode_bytes,
    encode_bytes,
)
from connect_relay.domain.value_objects.address import Address

CONNECTION_REQUESTED_EVENT_TYPE: str = "relay.connection.requested"

CONNECTION_RESPONDED_EVENT_TYPE: str = "relay.connection.responded"


@dataclass(frozen=True, eq=True)
class ConnectionRequestedEvent:
    """Record of a connection request.

    Attributes:
        recipient: Address the request is addressed to.
        sender: Address that sent (and paid for) the request.
        public_key: Public key the sender declares for the recipient to
            encrypt its response with.
        payload: Opaque payload bytes, typically already encrypted.
        emitted_at: When the record was emitted (UTC).
    """

    event_type: ClassVar[str] = CONNECTION_REQUESTED_EVENT_TYPE

    recipient: Address
    sender: Address
    public_key: str
    payload: bytes
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for publication.

        Returns:
            Dict with string addresses and hex-encoded payload.
        """
        return {
            "event_type": self.event_type,
            "recipient": str(self.recipient),
            "sender": str(self.sender),
            "public_key": self.public_key,
            "payload": encode_bytes(self.payload),
            "emitted_at": self.emitted_at.isoformat(),
            "schema_version": RELAY_RECORD_SCHEMA_VERSION,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConnectionRequestedEvent:
        """Deserialize from dictionary.

        Raises:
            KeyError: If required fields are missing.
            InvalidArgumentError: If an address is malformed.
        """
        return cls(
            recipient=Address.parse(data["recipient"]),
            sender=Address.parse(data["sender"]),
            public_key=data["public_key"],
            payload=decode_bytes(data["payload"]),
            emitted_at=datetime.fromisoformat(data["emitted_at"]),
        )


@dataclass(frozen=True, eq=True)
class ConnectionRespondedEvent:
    """Record of a connection response.

    Attributes:
        recipient: Address the response is addressed to (the requester).
        sender: Address that responded.
        response: Opaque response value.
        emitted_at: When the record was emitted (UTC).
    """

    event_type: ClassVar[str] = CONNECTION_RESPONDED_EVENT_TYPE

    recipient: Address
    sender: Address
    response: bytes
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "recipient": str(self.recipient),
            "sender": str(self.sender),
            "response": encode_bytes(self.response),
            "emitted_at": self.emitted_at.isoformat(),
            "schema_version": RELAY_RECORD_SCHEMA_VERSION,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConnectionRespondedEvent:
        return cls(
            recipient=Address.parse(data["recipient"]),
            sender=Address.parse(data["sender"]),
            response=decode_bytes(data["response"]),
            emitted_at=datetime.fromisoformat(data["emitted_at"]),
        )

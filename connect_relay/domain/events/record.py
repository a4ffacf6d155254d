"""Common shape of relay records."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Protocol, runtime_checkable

# Schema version stamped into every serialized record
RELAY_RECORD_SCHEMA_VERSION: str = "1.0.0"


@runtime_checkable
class RelayRecord(Protocol):
    """Any record the relay publishes.

    Attributes:
        event_type: Dotted record type name, constant per class.
        emitted_at: When the record was emitted (UTC).
    """

    event_type: ClassVar[str]
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        ...


def encode_bytes(data: bytes) -> str:
    """Render opaque bytes as a 0x-prefixed hex string."""
    return "0x" + data.hex()


def decode_bytes(text: str) -> bytes:
    """Inverse of encode_bytes."""
    return bytes.fromhex(text[2:] if text.startswith("0x") else text)

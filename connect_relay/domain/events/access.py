"""Role change records: admin set membership and ownership."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from connect_relay.domain.events.record import RELAY_RECORD_SCHEMA_VERSION
from connect_relay.domain.value_objects.address import Address

ADMIN_ADDED_EVENT_TYPE: str = "relay.access.admin_added"

ADMIN_REMOVED_EVENT_TYPE: str = "relay.access.admin_removed"

ADMIN_RESIGNED_EVENT_TYPE: str = "relay.access.admin_resigned"

OWNERSHIP_TRANSFERRED_EVENT_TYPE: str = "relay.access.ownership_transferred"


@dataclass(frozen=True, eq=True)
class AdminAddedEvent:
    """Record of an identity joining the admin set.

    Attributes:
        admin: Address added.
        emitted_at: When the record was emitted (UTC).
    """

    event_type: ClassVar[str] = ADMIN_ADDED_EVENT_TYPE

    admin: Address
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "admin": str(self.admin),
            "emitted_at": self.emitted_at.isoformat(),
            "schema_version": RELAY_RECORD_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class AdminRemovedEvent:
    """Record of the owner removing an identity from the admin set."""

    event_type: ClassVar[str] = ADMIN_REMOVED_EVENT_TYPE

    admin: Address
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "admin": str(self.admin),
            "emitted_at": self.emitted_at.isoformat(),
            "schema_version": RELAY_RECORD_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class AdminResignedEvent:
    """Record of an admin removing itself from the admin set."""

    event_type: ClassVar[str] = ADMIN_RESIGNED_EVENT_TYPE

    admin: Address
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "admin": str(self.admin),
            "emitted_at": self.emitted_at.isoformat(),
            "schema_version": RELAY_RECORD_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class OwnershipTransferredEvent:
    """Record of the owner role moving to a new identity.

    Attributes:
        previous_owner: Owner before the transfer.
        new_owner: Owner after the transfer.
        emitted_at: When the record was emitted (UTC).
    """

    event_type: ClassVar[str] = OWNERSHIP_TRANSFERRED_EVENT_TYPE

    previous_owner: Address
    new_owner: Address
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "previous_owner": str(self.previous_owner),
            "new_owner": str(self.new_owner),
            "emitted_at": self.emitted_at.isoformat(),
            "schema_version": RELAY_RECORD_SCHEMA_VERSION,
        }

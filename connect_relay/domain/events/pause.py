"""Pause switch change records.

One record type per switch so that observers can subscribe to exactly the
category they care about.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from connect_relay.domain.events.record import RELAY_RECORD_SCHEMA_VERSION
from connect_relay.domain.value_objects.address import Address
from connect_relay.domain.value_objects.pause_flag import PauseFlag

REQUESTS_PAUSE_CHANGED_EVENT_TYPE: str = "relay.pause.requests_changed"

RESPONSES_PAUSE_CHANGED_EVENT_TYPE: str = "relay.pause.responses_changed"

ADMIN_WITHDRAWALS_PAUSE_CHANGED_EVENT_TYPE: str = (
    "relay.pause.admin_withdrawals_changed"
)


@dataclass(frozen=True, eq=True)
class PauseChangedEvent:
    """Fields shared by the three pause change records.

    Attributes:
        actor: Address that flipped the switch.
        paused: New value of the switch.
        emitted_at: When the record was emitted (UTC).
    """

    event_type: ClassVar[str]
    flag: ClassVar[PauseFlag]

    actor: Address
    paused: bool
    emitted_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "actor": str(self.actor),
            "paused": self.paused,
            "emitted_at": self.emitted_at.isoformat(),
            "schema_version": RELAY_RECORD_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class RequestsPauseChangedEvent(PauseChangedEvent):
    """Record of the requests switch being written."""

    event_type: ClassVar[str] = REQUESTS_PAUSE_CHANGED_EVENT_TYPE
    flag: ClassVar[PauseFlag] = PauseFlag.REQUESTS


@dataclass(frozen=True, eq=True)
class ResponsesPauseChangedEvent(PauseChangedEvent):
    """Record of the responses switch being written."""

    event_type: ClassVar[str] = RESPONSES_PAUSE_CHANGED_EVENT_TYPE
    flag: ClassVar[PauseFlag] = PauseFlag.RESPONSES


@dataclass(frozen=True, eq=True)
class AdminWithdrawalsPauseChangedEvent(PauseChangedEvent):
    """Record of the admin withdrawals switch being written."""

    event_type: ClassVar[str] = ADMIN_WITHDRAWALS_PAUSE_CHANGED_EVENT_TYPE
    flag: ClassVar[PauseFlag] = PauseFlag.ADMIN_WITHDRAWALS


_EVENT_BY_FLAG: dict[PauseFlag, type[PauseChangedEvent]] = {
    PauseFlag.REQUESTS: RequestsPauseChangedEvent,
    PauseFlag.RESPONSES: ResponsesPauseChangedEvent,
    PauseFlag.ADMIN_WITHDRAWALS: AdminWithdrawalsPauseChangedEvent,
}


def pause_changed_event_for(
    flag: PauseFlag,
    actor: Address,
    paused: bool,
    emitted_at: datetime,
) -> PauseChangedEvent:
    """Build the record type matching a pause switch.

    Args:
        flag: The switch that was written.
        actor: Address that wrote it.
        paused: New value.
        emitted_at: Emission time.

    Returns:
        The flag-specific pause change record.
    """
    return _EVENT_BY_FLAG[flag](actor=actor, paused=paused, emitted_at=emitted_at)

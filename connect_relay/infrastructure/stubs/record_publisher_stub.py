"""Record Publisher Stub for testing and development.

Keeps every published record in memory, in publication order.
"""

from __future__ import annotations

from typing import TypeVar

from connect_relay.domain.events.record import RelayRecord

RecordT = TypeVar("RecordT")


class RecordPublisherStub:
    """In-memory implementation of RelayRecordPublisherProtocol.

    Attributes:
        records: Published records, oldest first.
        fail_with: If set, publish() raises this exception instead of
            recording (for atomicity tests).
    """

    def __init__(self) -> None:
        self.records: list[RelayRecord] = []
        self.fail_with: Exception | None = None

    async def publish(self, record: RelayRecord) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.records.append(record)

    def of_type(self, record_type: type[RecordT]) -> list[RecordT]:
        """Published records of one class, oldest first."""
        return [r for r in self.records if isinstance(r, record_type)]

    def event_types(self) -> list[str]:
        return [r.event_type for r in self.records]

    def clear(self) -> None:
        """Forget all records (for testing)."""
        self.records.clear()

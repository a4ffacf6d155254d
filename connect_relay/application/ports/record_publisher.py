"""Record Publisher Port.

Records are the relay's only output: they are broadcast to observers and
never stored by the relay. The publisher is called once per successful
operation, before the operation's state change is committed, so a
publisher failure aborts the operation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from connect_relay.domain.events.record import RelayRecord


@runtime_checkable
class RelayRecordPublisherProtocol(Protocol):
    """Protocol for broadcasting relay records to observers.

    Usage:
        await publisher.publish(
            ConnectionRequestedEvent(
                recipient=to,
                sender=caller,
                public_key=public_key,
                payload=payload,
                emitted_at=now,
            )
        )
    """

    async def publish(self, record: RelayRecord) -> None:
        """Broadcast one record.

        Args:
            record: The record to broadcast.

        Raises:
            Any exception aborts the calling operation.
        """
        ...

"""Connection relay facade.

ConnectionRelay is the single entry point for every relay operation. It
owns the RelayState and guarantees:

- Serialization: every mutating call runs under one asyncio.Lock, so
  calls are totally ordered and none observes another's partial state.
- Atomicity: each handler works on a staged copy of the state. The copy
  replaces the committed state only when the handler returns; any
  exception discards it. A rejected call changes nothing and emits
  nothing.
- Correlation: log lines of one call share a correlation ID, taken from
  the HTTP request when there is one and generated per call otherwise.

Reads (roles, switches, fee parameters) are unrestricted and lock-free.

Usage:
    relay = ConnectionRelay(
        state=RelayState.initial(deployer),
        relay_address=relay_address,
        token_gateway=gateway,
        publisher=publisher,
        time_authority=SystemTimeAuthority(),
    )
    await relay.add_admin(caller=deployer, identity=alice)
    await relay.send_connection_request(
        caller=bob, to=alice, public_key="...", payload=b"..."
    )
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeVar

from connect_relay.application.services.access_control_service import (
    AccessControlService,
)
from connect_relay.application.services.base import LoggingMixin
from connect_relay.application.services.connection_service import ConnectionService
from connect_relay.application.services.custody_service import CustodyService
from connect_relay.application.services.fee_parameter_service import (
    FeeParameterService,
)
from connect_relay.application.services.pause_controller_service import (
    PauseControllerService,
)
from connect_relay.domain.exceptions import RelayError
from connect_relay.domain.models.relay_state import RelayState
from connect_relay.domain.value_objects import Address, PauseFlag
from connect_relay.infrastructure.observability.correlation import correlation_scope

if TYPE_CHECKING:
    from connect_relay.application.ports.record_publisher import (
        RelayRecordPublisherProtocol,
    )
    from connect_relay.application.ports.time_authority import TimeAuthorityProtocol
    from connect_relay.application.ports.token_ledger import TokenGatewayProtocol
    from connect_relay.domain.events import (
        AdminAddedEvent,
        AdminRemovedEvent,
        AdminResignedEvent,
        ConnectionRequestedEvent,
        ConnectionRespondedEvent,
        FeeTokenChangedEvent,
        OwnershipTransferredEvent,
        PauseChangedEvent,
        RequestFeeChangedEvent,
        TokensWithdrawnEvent,
    )
    from connect_relay.infrastructure.monitoring.metrics import RelayMetrics

RecordT = TypeVar("RecordT")


class ConnectionRelay(LoggingMixin):
    """Serialized, atomic entry point over the relay state.

    Attributes:
        relay_address: Account that holds collected fees.
    """

    def __init__(
        self,
        state: RelayState,
        relay_address: Address,
        token_gateway: TokenGatewayProtocol,
        publisher: RelayRecordPublisherProtocol,
        time_authority: TimeAuthorityProtocol,
        metrics: RelayMetrics | None = None,
    ) -> None:
        """Wire the relay services around a state instance.

        Args:
            state: Initial relay state; the relay takes ownership of it.
            relay_address: Account that holds collected fees.
            token_gateway: Resolves token addresses to ledgers.
            publisher: Where records are broadcast.
            time_authority: Source of emission timestamps.
            metrics: Optional Prometheus counters.
        """
        self._state = state
        self.relay_address = relay_address
        self._metrics = metrics
        self._lock = asyncio.Lock()

        self._access = AccessControlService(publisher, time_authority)
        self._pause = PauseControllerService(self._access, publisher, time_authority)
        self._fees = FeeParameterService(self._access, publisher, time_authority)
        self._connections = ConnectionService(
            self._pause, token_gateway, publisher, time_authority, relay_address
        )
        self._custody = CustodyService(
            self._access,
            self._pause,
            token_gateway,
            publisher,
            time_authority,
            relay_address,
        )
        self._init_logger()

    async def _execute(
        self,
        operation: str,
        handler: Callable[[RelayState], Awaitable[RecordT]],
    ) -> RecordT:
        with correlation_scope():
            async with self._lock:
                staged = self._state.staged_copy()
                try:
                    record = await handler(staged)
                except RelayError as exc:
                    if self._metrics is not None:
                        self._metrics.record_rejection(operation, type(exc).__name__)
                    raise
                self._state = staged

        if self._metrics is not None:
            self._metrics.record_emitted(getattr(record, "event_type", operation))
        return record

    # =========================================================================
    # Reads
    # =========================================================================

    @property
    def owner(self) -> Address:
        return self._state.owner

    @property
    def admins(self) -> frozenset[Address]:
        return frozenset(self._state.admins)

    def is_owner(self, identity: Address) -> bool:
        return self._state.is_owner(identity)

    def is_admin(self, identity: Address) -> bool:
        return self._state.is_admin(identity)

    def is_requests_paused(self) -> bool:
        return self._state.is_paused(PauseFlag.REQUESTS)

    def is_responses_paused(self) -> bool:
        return self._state.is_paused(PauseFlag.RESPONSES)

    def is_admin_withdrawals_paused(self) -> bool:
        return self._state.is_paused(PauseFlag.ADMIN_WITHDRAWALS)

    def get_request_fee(self) -> int:
        return self._state.fee_amount

    def get_fee_token(self) -> Address:
        return self._state.fee_token

    def snapshot(self) -> RelayState:
        """Independent copy of the committed state."""
        return self._state.staged_copy()

    async def custody_balance(self, token: Address) -> int:
        """Amount of a token held by the relay."""
        return await self._custody.custody_balance(token)

    # =========================================================================
    # Access control
    # =========================================================================

    async def transfer_ownership(
        self, caller: Address, new_owner: Address
    ) -> OwnershipTransferredEvent:
        return await self._execute(
            "transfer_ownership",
            lambda state: self._access.transfer_ownership(state, caller, new_owner),
        )

    async def add_admin(self, caller: Address, identity: Address) -> AdminAddedEvent:
        return await self._execute(
            "add_admin",
            lambda state: self._access.add_admin(state, caller, identity),
        )

    async def remove_admin(
        self, caller: Address, identity: Address
    ) -> AdminRemovedEvent:
        return await self._execute(
            "remove_admin",
            lambda state: self._access.remove_admin(state, caller, identity),
        )

    async def resign_admin(self, caller: Address) -> AdminResignedEvent:
        return await self._execute(
            "resign_admin",
            lambda state: self._access.resign_admin(state, caller),
        )

    # =========================================================================
    # Pause switches
    # =========================================================================

    async def set_requests_paused(
        self, caller: Address, paused: bool
    ) -> PauseChangedEvent:
        return await self._execute(
            "set_requests_paused",
            lambda state: self._pause.set_requests_paused(state, caller, paused),
        )

    async def set_responses_paused(
        self, caller: Address, paused: bool
    ) -> PauseChangedEvent:
        return await self._execute(
            "set_responses_paused",
            lambda state: self._pause.set_responses_paused(state, caller, paused),
        )

    async def set_admin_withdrawals_paused(
        self, caller: Address, paused: bool
    ) -> PauseChangedEvent:
        return await self._execute(
            "set_admin_withdrawals_paused",
            lambda state: self._pause.set_admin_withdrawals_paused(
                state, caller, paused
            ),
        )

    # =========================================================================
    # Fee parameters
    # =========================================================================

    async def set_request_fee(
        self, caller: Address, amount: int
    ) -> RequestFeeChangedEvent:
        return await self._execute(
            "set_request_fee",
            lambda state: self._fees.set_request_fee(state, caller, amount),
        )

    async def set_fee_token(
        self, caller: Address, token: Address
    ) -> FeeTokenChangedEvent:
        return await self._execute(
            "set_fee_token",
            lambda state: self._fees.set_fee_token(state, caller, token),
        )

    # =========================================================================
    # Relay operations
    # =========================================================================

    async def send_connection_request(
        self,
        caller: Address,
        to: Address,
        public_key: str,
        payload: bytes,
    ) -> ConnectionRequestedEvent:
        return await self._execute(
            "send_connection_request",
            lambda state: self._connections.send_connection_request(
                state, caller, to, public_key, payload
            ),
        )

    async def send_connection_response(
        self,
        caller: Address,
        to: Address,
        response: bytes,
    ) -> ConnectionRespondedEvent:
        return await self._execute(
            "send_connection_response",
            lambda state: self._connections.send_connection_response(
                state, caller, to, response
            ),
        )

    # =========================================================================
    # Custody
    # =========================================================================

    async def withdraw_tokens(
        self,
        caller: Address,
        token: Address,
        amount: int,
        recipient: Address,
    ) -> TokensWithdrawnEvent:
        return await self._execute(
            "withdraw_tokens",
            lambda state: self._custody.withdraw_tokens(
                state, caller, token, amount, recipient
            ),
        )

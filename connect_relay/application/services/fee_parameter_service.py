"""Fee and fee token parameters.

Fee tuning is an admin action. Replacing the fee token is an owner
action, because it changes which external token contract the relay
trusts for collection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from connect_relay.application.services.base import LoggingMixin
from connect_relay.domain.errors import InvalidArgumentError
from connect_relay.domain.events import FeeTokenChangedEvent, RequestFeeChangedEvent
from connect_relay.domain.value_objects import Address

if TYPE_CHECKING:
    from connect_relay.application.ports.record_publisher import (
        RelayRecordPublisherProtocol,
    )
    from connect_relay.application.ports.time_authority import TimeAuthorityProtocol
    from connect_relay.application.services.access_control_service import (
        AccessControlService,
    )
    from connect_relay.domain.models.relay_state import RelayState


class FeeParameterService(LoggingMixin):
    """Writes the fee amount and fee token."""

    def __init__(
        self,
        access: AccessControlService,
        publisher: RelayRecordPublisherProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._access = access
        self._publisher = publisher
        self._time = time_authority
        self._init_logger()

    async def set_request_fee(
        self,
        state: RelayState,
        caller: Address,
        amount: int,
    ) -> RequestFeeChangedEvent:
        """Set the fee charged per connection request.

        No upper bound is enforced. Zero makes requests free.

        Args:
            state: Relay state to operate on.
            caller: Identity making the call.
            amount: New fee in token base units.

        Returns:
            The published RequestFeeChangedEvent.

        Raises:
            UnauthorizedError: If caller is not an admin.
            InvalidArgumentError: If amount is negative.
        """
        operation = "set_request_fee"
        self._access.require_admin(state, caller, operation)
        log = self._log_operation(operation, caller=caller, new_fee=amount)

        # Fee is an unsigned amount
        if amount < 0:
            log.warning("fee_change_rejected", reason="negative_amount")
            raise InvalidArgumentError(f"Fee must be non-negative, got {amount}")

        event = RequestFeeChangedEvent(
            actor=caller,
            new_fee=amount,
            emitted_at=self._time.utcnow(),
        )
        await self._publisher.publish(event)
        previous_fee = state.fee_amount
        state.fee_amount = amount

        log.info("request_fee_changed", previous_fee=previous_fee)
        return event

    async def set_fee_token(
        self,
        state: RelayState,
        caller: Address,
        token: Address,
    ) -> FeeTokenChangedEvent:
        """Replace the token fees are collected in.

        Raises:
            UnauthorizedError: If caller is not the owner.
            InvalidArgumentError: If token is the null address.
        """
        operation = "set_fee_token"
        self._access.require_owner(state, caller, operation)
        log = self._log_operation(operation, caller=caller, new_token=token)

        if token.is_null:
            log.warning("fee_token_change_rejected", reason="null_address")
            raise InvalidArgumentError("Fee token must not be the null address")

        event = FeeTokenChangedEvent(
            previous_token=state.fee_token,
            new_token=token,
            actor=caller,
            emitted_at=self._time.utcnow(),
        )
        await self._publisher.publish(event)
        state.fee_token = token

        log.info("fee_token_changed", previous_token=str(event.previous_token))
        return event

"""Custody and withdrawal of tokens held by the relay.

Any token the relay holds can be withdrawn by address, not only the fee
token. Tokens sent to the relay by mistake are recoverable this way.

Withdrawal flow:
1. caller is owner or admin
2. admin withdrawals switch not set, unless the caller is the owner
3. recipient is not the null address, amount > 0
4. relay balance of the token >= amount (checked before any transfer)
5. transfer(relay -> recipient); a False result aborts with
   TokenTransferFailedError
6. emit TokensWithdrawnEvent
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from connect_relay.application.services.base import LoggingMixin
from connect_relay.domain.errors import (
    InsufficientBalanceError,
    InvalidArgumentError,
    TokenTransferFailedError,
)
from connect_relay.domain.events import TokensWithdrawnEvent
from connect_relay.domain.value_objects import Address, PauseFlag

if TYPE_CHECKING:
    from connect_relay.application.ports.record_publisher import (
        RelayRecordPublisherProtocol,
    )
    from connect_relay.application.ports.time_authority import TimeAuthorityProtocol
    from connect_relay.application.ports.token_ledger import TokenGatewayProtocol
    from connect_relay.application.services.access_control_service import (
        AccessControlService,
    )
    from connect_relay.application.services.pause_controller_service import (
        PauseControllerService,
    )
    from connect_relay.domain.models.relay_state import RelayState


class CustodyService(LoggingMixin):
    """Withdraws tokens from the relay's custody."""

    def __init__(
        self,
        access: AccessControlService,
        pause: PauseControllerService,
        token_gateway: TokenGatewayProtocol,
        publisher: RelayRecordPublisherProtocol,
        time_authority: TimeAuthorityProtocol,
        relay_address: Address,
    ) -> None:
        self._access = access
        self._pause = pause
        self._tokens = token_gateway
        self._publisher = publisher
        self._time = time_authority
        self._relay_address = relay_address
        self._init_logger()

    async def custody_balance(self, token: Address) -> int:
        """Amount of a token currently held by the relay."""
        return await self._tokens.get_ledger(token).balance_of(self._relay_address)

    async def withdraw_tokens(
        self,
        state: RelayState,
        caller: Address,
        token: Address,
        amount: int,
        recipient: Address,
    ) -> TokensWithdrawnEvent:
        """Send tokens held by the relay to a recipient.

        Args:
            state: Relay state to read roles and switches from.
            caller: Identity making the call.
            token: Address of the token to withdraw.
            amount: Amount in base units.
            recipient: Address receiving the tokens.

        Returns:
            The published TokensWithdrawnEvent.

        Raises:
            UnauthorizedError: If caller is neither owner nor admin.
            OperationPausedError: If admin withdrawals are paused and the
                caller is not the owner.
            InvalidArgumentError: If recipient is null or amount <= 0.
            InsufficientBalanceError: If the relay holds less than amount.
            TokenTransferFailedError: If the token reports failure.
        """
        operation = "withdraw_tokens"
        self._access.require_admin_or_owner(state, caller, operation)
        self._pause.ensure_not_paused(
            state, PauseFlag.ADMIN_WITHDRAWALS, caller, exempt_if_owner=True
        )
        log = self._log_operation(
            operation,
            caller=caller,
            token=token,
            amount=amount,
            recipient=recipient,
        )

        if recipient.is_null:
            log.warning("withdrawal_rejected", reason="null_recipient")
            raise InvalidArgumentError("Recipient must not be the null address")
        if amount <= 0:
            log.warning("withdrawal_rejected", reason="non_positive_amount")
            raise InvalidArgumentError(
                f"Withdrawal amount must be positive, got {amount}"
            )

        ledger = self._tokens.get_ledger(token)
        available = await ledger.balance_of(self._relay_address)
        if available < amount:
            log.warning(
                "withdrawal_rejected",
                reason="insufficient_balance",
                available=available,
            )
            raise InsufficientBalanceError(token, available=available, requested=amount)

        if not await ledger.transfer(
            caller=self._relay_address, recipient=recipient, amount=amount
        ):
            log.error("withdrawal_transfer_failed")
            raise TokenTransferFailedError(token, amount, "transfer")

        event = TokensWithdrawnEvent(
            token=token,
            actor=caller,
            amount=amount,
            recipient=recipient,
            emitted_at=self._time.utcnow(),
        )
        await self._publisher.publish(event)

        log.info("tokens_withdrawn", remaining=available - amount)
        return event

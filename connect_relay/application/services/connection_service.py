"""Connection request and response relay.

Both operations are pure relays. They check the pause switch and the
addressing, collect the fee for requests, and emit a record. They never
look up a prior request before a response, never deduplicate and never
rate limit beyond the fee and the switches.

Request flow:
1. requests switch not set
2. recipient is not the null address and not the caller
3. fee > 0: transfer_from(caller -> relay) on the fee token; a False
   result, or a fee token the gateway cannot resolve, aborts with
   TokenTransferFailedError and no record
   fee == 0: the token is not touched at all
4. emit ConnectionRequestedEvent; if publishing raises, the collected fee
   is transferred back to the caller before the error propagates

Response flow:
1. responses switch not set
2. recipient is not the null address and not the caller
3. emit ConnectionRespondedEvent
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from connect_relay.application.services.base import LoggingMixin
from connect_relay.domain.errors import InvalidArgumentError, TokenTransferFailedError
from connect_relay.domain.events import (
    ConnectionRequestedEvent,
    ConnectionRespondedEvent,
)
from connect_relay.domain.value_objects import Address, PauseFlag

if TYPE_CHECKING:
    from structlog import BoundLogger

    from connect_relay.application.ports.record_publisher import (
        RelayRecordPublisherProtocol,
    )
    from connect_relay.application.ports.time_authority import TimeAuthorityProtocol
    from connect_relay.application.ports.token_ledger import (
        TokenGatewayProtocol,
        TokenLedgerProtocol,
    )
    from connect_relay.application.services.pause_controller_service import (
        PauseControllerService,
    )
    from connect_relay.domain.models.relay_state import RelayState


class ConnectionService(LoggingMixin):
    """Emits connection requests and responses.

    Attributes:
        _pause: Pause switch checks.
        _tokens: Resolves the fee token to its ledger.
        _publisher: Where connection records are broadcast.
        _time: Source of emission timestamps.
        _relay_address: Account that receives fees.
    """

    def __init__(
        self,
        pause: PauseControllerService,
        token_gateway: TokenGatewayProtocol,
        publisher: RelayRecordPublisherProtocol,
        time_authority: TimeAuthorityProtocol,
        relay_address: Address,
    ) -> None:
        self._pause = pause
        self._tokens = token_gateway
        self._publisher = publisher
        self._time = time_authority
        self._relay_address = relay_address
        self._init_logger()

    async def send_connection_request(
        self,
        state: RelayState,
        caller: Address,
        to: Address,
        public_key: str,
        payload: bytes,
    ) -> ConnectionRequestedEvent:
        """Collect the fee and emit a connection request record.

        Args:
            state: Relay state to read switches and fee from.
            caller: Identity sending the request and paying the fee.
            to: Identity the request is addressed to.
            public_key: Public key the caller declares for the response.
            payload: Opaque payload bytes.

        Returns:
            The published ConnectionRequestedEvent.

        Raises:
            OperationPausedError: If requests are paused.
            InvalidArgumentError: If to is null or the caller itself.
            TokenTransferFailedError: If the fee could not be collected.
        """
        operation = "send_connection_request"
        log = self._log_operation(operation, sender=caller, recipient=to)

        self._pause.ensure_not_paused(state, PauseFlag.REQUESTS, caller)
        self._check_addressing(caller, to, log, "request")

        fee = state.fee_amount
        ledger = None
        if fee > 0:
            ledger = await self._collect_fee(state, caller, log)

        event = ConnectionRequestedEvent(
            recipient=to,
            sender=caller,
            public_key=public_key,
            payload=payload,
            emitted_at=self._time.utcnow(),
        )
        try:
            await self._publisher.publish(event)
        except Exception:
            if ledger is not None:
                await self._refund_fee(ledger, state, caller, fee, log)
            raise

        log.info("connection_requested", fee=fee, payload_size=len(payload))
        return event

    async def send_connection_response(
        self,
        state: RelayState,
        caller: Address,
        to: Address,
        response: bytes,
    ) -> ConnectionRespondedEvent:
        """Emit a connection response record.

        Raises:
            OperationPausedError: If responses are paused.
            InvalidArgumentError: If to is null or the caller itself.
        """
        operation = "send_connection_response"
        log = self._log_operation(operation, sender=caller, recipient=to)

        self._pause.ensure_not_paused(state, PauseFlag.RESPONSES, caller)
        self._check_addressing(caller, to, log, "response")

        event = ConnectionRespondedEvent(
            recipient=to,
            sender=caller,
            response=response,
            emitted_at=self._time.utcnow(),
        )
        await self._publisher.publish(event)

        log.info("connection_responded", response_size=len(response))
        return event

    async def _collect_fee(
        self, state: RelayState, caller: Address, log: BoundLogger
    ) -> TokenLedgerProtocol:
        fee = state.fee_amount
        try:
            ledger = self._tokens.get_ledger(state.fee_token)
        except InvalidArgumentError:
            # Fee token unknown to the gateway is a collaborator failure
            log.error(
                "connection_request_rejected",
                reason="fee_token_unavailable",
                fee_token=str(state.fee_token),
            )
            raise TokenTransferFailedError(
                state.fee_token, fee, "transfer_from"
            ) from None

        collected = await ledger.transfer_from(
            caller=self._relay_address,
            source=caller,
            recipient=self._relay_address,
            amount=fee,
        )
        if not collected:
            log.warning(
                "connection_request_rejected",
                reason="fee_transfer_failed",
                fee=fee,
                fee_token=str(state.fee_token),
            )
            raise TokenTransferFailedError(state.fee_token, fee, "transfer_from")
        log.debug("request_fee_collected", fee=fee, fee_token=str(state.fee_token))
        return ledger

    async def _refund_fee(
        self,
        ledger: TokenLedgerProtocol,
        state: RelayState,
        caller: Address,
        fee: int,
        log: BoundLogger,
    ) -> None:
        """Return a collected fee when the request record was not emitted."""
        refunded = await ledger.transfer(
            caller=self._relay_address,
            recipient=caller,
            amount=fee,
        )
        if refunded:
            log.warning("request_fee_refunded", fee=fee, fee_token=str(state.fee_token))
        else:
            log.error(
                "request_fee_refund_failed",
                fee=fee,
                fee_token=str(state.fee_token),
            )

    @staticmethod
    def _check_addressing(
        caller: Address, to: Address, log: BoundLogger, kind: str
    ) -> None:
        if to.is_null:
            log.warning(f"connection_{kind}_rejected", reason="null_recipient")
            raise InvalidArgumentError("Recipient must not be the null address")
        if to == caller:
            log.warning(f"connection_{kind}_rejected", reason="self_addressed")
            raise InvalidArgumentError(f"Cannot send a connection {kind} to yourself")

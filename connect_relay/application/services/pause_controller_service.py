"""Pause controller: three independent pause switches.

- requests: blocks connection requests; written by admins
- responses: blocks connection responses; written by admins
- admin withdrawals: blocks withdrawals by non-owner admins; written by
  the owner

The owner is never blocked by the admin withdrawals switch. This keeps an
extraction path open even if the switch is left set. The exemption is an
explicit argument of ensure_not_paused rather than a separate guard.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from connect_relay.application.services.base import LoggingMixin
from connect_relay.domain.errors import OperationPausedError
from connect_relay.domain.events import pause_changed_event_for
from connect_relay.domain.value_objects import Address, PauseFlag

if TYPE_CHECKING:
    from connect_relay.application.ports.record_publisher import (
        RelayRecordPublisherProtocol,
    )
    from connect_relay.application.ports.time_authority import TimeAuthorityProtocol
    from connect_relay.application.services.access_control_service import (
        AccessControlService,
    )
    from connect_relay.domain.events import PauseChangedEvent
    from connect_relay.domain.models.relay_state import RelayState


class PauseControllerService(LoggingMixin):
    """Writes and checks the pause switches.

    Attributes:
        _access: Guards used to authorize switch writes.
        _publisher: Where pause change records are broadcast.
        _time: Source of emission timestamps.
    """

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

    async def set_requests_paused(
        self, state: RelayState, caller: Address, paused: bool
    ) -> PauseChangedEvent:
        """Write the requests switch (admin only)."""
        self._access.require_admin(state, caller, "set_requests_paused")
        return await self._write(state, caller, PauseFlag.REQUESTS, paused)

    async def set_responses_paused(
        self, state: RelayState, caller: Address, paused: bool
    ) -> PauseChangedEvent:
        """Write the responses switch (admin only)."""
        self._access.require_admin(state, caller, "set_responses_paused")
        return await self._write(state, caller, PauseFlag.RESPONSES, paused)

    async def set_admin_withdrawals_paused(
        self, state: RelayState, caller: Address, paused: bool
    ) -> PauseChangedEvent:
        """Write the admin withdrawals switch (owner only)."""
        self._access.require_owner(state, caller, "set_admin_withdrawals_paused")
        return await self._write(state, caller, PauseFlag.ADMIN_WITHDRAWALS, paused)

    async def _write(
        self,
        state: RelayState,
        caller: Address,
        flag: PauseFlag,
        paused: bool,
    ) -> PauseChangedEvent:
        # Unconditional overwrite: writing the current value still emits a record
        event = pause_changed_event_for(
            flag=flag,
            actor=caller,
            paused=paused,
            emitted_at=self._time.utcnow(),
        )
        await self._publisher.publish(event)
        state.set_paused(flag, paused)

        self._log_operation(
            f"set_{flag.value}_paused", caller=caller
        ).info("pause_switch_written", flag=flag.value, paused=paused)
        return event

    def ensure_not_paused(
        self,
        state: RelayState,
        flag: PauseFlag,
        caller: Address,
        *,
        exempt_if_owner: bool = False,
    ) -> None:
        """Reject the call if the switch is set.

        Args:
            state: Relay state to check.
            flag: Switch guarding the operation.
            caller: Identity making the call.
            exempt_if_owner: If True, the owner passes even when the switch
                is set.

        Raises:
            OperationPausedError: If the switch is set and no exemption applies.
        """
        if not state.is_paused(flag):
            return
        if exempt_if_owner and state.is_owner(caller):
            self._log_operation("ensure_not_paused", caller=caller).info(
                "pause_bypassed_by_owner",
                flag=flag.value,
            )
            return

        self._log_operation("ensure_not_paused", caller=caller).warning(
            "operation_paused",
            flag=flag.value,
        )
        raise OperationPausedError(flag)

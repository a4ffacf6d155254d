"""Access control service: role guards and role management.

The owner is a single identity; admins are a set. The two are independent
after initialization: transferring ownership or removing an admin never
touches the other role.

Guards:
- require_owner: caller is the owner
- require_admin: caller is in the admin set
- require_admin_or_owner: either of the above

Role operations:
- transfer_ownership: owner hands the role to a non-null identity
- add_admin / remove_admin: owner manages the admin set
- resign_admin: an admin removes itself (and only itself)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from connect_relay.application.services.base import LoggingMixin
from connect_relay.domain.errors import (
    AdminAlreadyExistsError,
    AdminNotFoundError,
    InvalidArgumentError,
    UnauthorizedError,
)
from connect_relay.domain.events import (
    AdminAddedEvent,
    AdminRemovedEvent,
    AdminResignedEvent,
    OwnershipTransferredEvent,
)
from connect_relay.domain.value_objects import Address, Role

if TYPE_CHECKING:
    from connect_relay.application.ports.record_publisher import (
        RelayRecordPublisherProtocol,
    )
    from connect_relay.application.ports.time_authority import TimeAuthorityProtocol
    from connect_relay.domain.models.relay_state import RelayState


class AccessControlService(LoggingMixin):
    """Guards and role management over RelayState.

    Every method takes the state it works on explicitly. Role operations
    validate first, publish their record, and only then mutate the state,
    so a rejected call leaves the state untouched.

    Attributes:
        _publisher: Where role change records are broadcast.
        _time: Source of emission timestamps.
    """

    def __init__(
        self,
        publisher: RelayRecordPublisherProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._publisher = publisher
        self._time = time_authority
        self._init_logger()

    # =========================================================================
    # Guards
    # =========================================================================

    def require_owner(self, state: RelayState, caller: Address, operation: str) -> None:
        """Reject callers other than the owner.

        Raises:
            UnauthorizedError: If caller is not the owner.
        """
        if not state.is_owner(caller):
            self._reject(operation, caller, Role.OWNER)

    def require_admin(self, state: RelayState, caller: Address, operation: str) -> None:
        """Reject callers outside the admin set.

        Raises:
            UnauthorizedError: If caller is not an admin.
        """
        if not state.is_admin(caller):
            self._reject(operation, caller, Role.ADMIN)

    def require_admin_or_owner(
        self, state: RelayState, caller: Address, operation: str
    ) -> None:
        """Reject callers that are neither owner nor admin.

        Raises:
            UnauthorizedError: If caller holds neither role.
        """
        if not (state.is_owner(caller) or state.is_admin(caller)):
            self._reject(operation, caller, Role.ADMIN_OR_OWNER)

    def _reject(self, operation: str, caller: Address, role: Role) -> None:
        self._log_operation(operation, caller=caller).warning(
            "operation_unauthorized",
            required_role=role.value,
        )
        raise UnauthorizedError(caller=caller, required_role=role)

    # =========================================================================
    # Role operations
    # =========================================================================

    async def transfer_ownership(
        self,
        state: RelayState,
        caller: Address,
        new_owner: Address,
    ) -> OwnershipTransferredEvent:
        """Hand the owner role to another identity.

        Admin set membership of the previous and new owner is unchanged.

        Args:
            state: Relay state to operate on.
            caller: Identity making the call.
            new_owner: Identity receiving the owner role.

        Returns:
            The published OwnershipTransferredEvent.

        Raises:
            UnauthorizedError: If caller is not the owner.
            InvalidArgumentError: If new_owner is the null address.
        """
        operation = "transfer_ownership"
        self.require_owner(state, caller, operation)
        log = self._log_operation(operation, caller=caller, new_owner=new_owner)

        if new_owner.is_null:
            log.warning("ownership_transfer_rejected", reason="null_address")
            raise InvalidArgumentError("New owner must not be the null address")

        event = OwnershipTransferredEvent(
            previous_owner=state.owner,
            new_owner=new_owner,
            emitted_at=self._time.utcnow(),
        )
        await self._publisher.publish(event)
        state.owner = new_owner

        log.info("ownership_transferred", previous_owner=str(event.previous_owner))
        return event

    async def add_admin(
        self,
        state: RelayState,
        caller: Address,
        identity: Address,
    ) -> AdminAddedEvent:
        """Insert an identity into the admin set.

        Raises:
            UnauthorizedError: If caller is not the owner.
            InvalidArgumentError: If identity is the null address.
            AdminAlreadyExistsError: If identity is already an admin.
        """
        operation = "add_admin"
        self.require_owner(state, caller, operation)
        log = self._log_operation(operation, caller=caller, admin=identity)

        if identity.is_null:
            log.warning("admin_add_rejected", reason="null_address")
            raise InvalidArgumentError("Admin must not be the null address")
        if state.is_admin(identity):
            log.warning("admin_add_rejected", reason="already_admin")
            raise AdminAlreadyExistsError(identity)

        event = AdminAddedEvent(admin=identity, emitted_at=self._time.utcnow())
        await self._publisher.publish(event)
        state.admins.add(identity)

        log.info("admin_added", admin_count=len(state.admins))
        return event

    async def remove_admin(
        self,
        state: RelayState,
        caller: Address,
        identity: Address,
    ) -> AdminRemovedEvent:
        """Remove an identity from the admin set.

        Raises:
            UnauthorizedError: If caller is not the owner.
            AdminNotFoundError: If identity is not an admin.
        """
        operation = "remove_admin"
        self.require_owner(state, caller, operation)
        log = self._log_operation(operation, caller=caller, admin=identity)

        if not state.is_admin(identity):
            log.warning("admin_remove_rejected", reason="not_admin")
            raise AdminNotFoundError(identity)

        event = AdminRemovedEvent(admin=identity, emitted_at=self._time.utcnow())
        await self._publisher.publish(event)
        state.admins.discard(identity)

        log.info("admin_removed", admin_count=len(state.admins))
        return event

    async def resign_admin(
        self,
        state: RelayState,
        caller: Address,
    ) -> AdminResignedEvent:
        """Remove the caller from the admin set.

        Only the caller can be resigned. An owner that resigns keeps the
        owner role.

        Raises:
            UnauthorizedError: If caller is not an admin.
        """
        operation = "resign_admin"
        self.require_admin(state, caller, operation)

        event = AdminResignedEvent(admin=caller, emitted_at=self._time.utcnow())
        await self._publisher.publish(event)
        state.admins.discard(caller)

        self._log_operation(operation, caller=caller).info(
            "admin_resigned",
            still_owner=state.is_owner(caller),
        )
        return event

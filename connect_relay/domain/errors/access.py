"""Access control errors raised by the role guards."""

from __future__ import annotations

from typing import TYPE_CHECKING

from connect_relay.domain.exceptions import RelayError

if TYPE_CHECKING:
    from connect_relay.domain.value_objects.address import Address
    from connect_relay.domain.value_objects.role import Role


class UnauthorizedError(RelayError):
    """Raised when the caller does not hold the role an operation requires.

    Attributes:
        caller: Address that attempted the operation.
        required_role: Role the guard demanded.
    """

    def __init__(self, caller: Address, required_role: Role) -> None:
        """Initialize unauthorized error.

        Args:
            caller: Address that attempted the operation.
            required_role: Role the guard demanded.
        """
        self.caller = caller
        self.required_role = required_role
        super().__init__(
            f"Caller {caller} is not authorized: requires {required_role.value}"
        )

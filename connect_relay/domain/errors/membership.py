"""Admin set membership errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from connect_relay.domain.exceptions import RelayError

if TYPE_CHECKING:
    from connect_relay.domain.value_objects.address import Address


class AdminAlreadyExistsError(RelayError):
    """Raised when adding an identity that is already an admin.

    Re-adding is rejected rather than silently ignored.

    Attributes:
        identity: The address that is already a member.
    """

    def __init__(self, identity: Address) -> None:
        self.identity = identity
        super().__init__(f"Address {identity} is already an admin")


class AdminNotFoundError(RelayError):
    """Raised when removing an identity that is not an admin.

    Attributes:
        identity: The address that is not a member.
    """

    def __init__(self, identity: Address) -> None:
        self.identity = identity
        super().__init__(f"Address {identity} is not an admin")

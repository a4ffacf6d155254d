"""Relay state: roles, pause switches and fee parameters.

RelayState is the single owned state object of a relay. It carries no
per-request data: requests and responses are emitted as records, never
stored.

Mutation rules (enforced by the application services, not here):
- owner changes only through an ownership transfer by the current owner
- admins changes through add/remove by the owner or self-resignation
- requests_paused / responses_paused are flipped by admins
- admin_withdrawals_paused is flipped by the owner
- fee_amount is set by admins, fee_token by the owner
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from connect_relay.domain.value_objects.address import Address
from connect_relay.domain.value_objects.pause_flag import PauseFlag

# 10 tokens at 18 decimals
DEFAULT_FEE_AMOUNT: int = 10**19

DEFAULT_FEE_TOKEN: Address = Address("0x779877a7b0d9e8603169ddbd7836e478b4624789")


@dataclass
class RelayState:
    """Owner, admin set, pause switches and fee parameters of one relay.

    Attributes:
        owner: The single top-privilege identity.
        admins: Admin set. Membership is independent of the owner role
            after initialization.
        requests_paused: Blocks connection requests when set.
        responses_paused: Blocks connection responses when set.
        admin_withdrawals_paused: Blocks withdrawals by non-owner admins.
        fee_amount: Fee in token base units charged per connection request.
        fee_token: Address of the token the fee is collected in.
    """

    owner: Address
    admins: set[Address] = field(default_factory=set)
    requests_paused: bool = False
    responses_paused: bool = False
    admin_withdrawals_paused: bool = False
    fee_amount: int = DEFAULT_FEE_AMOUNT
    fee_token: Address = DEFAULT_FEE_TOKEN

    @classmethod
    def initial(
        cls,
        deployer: Address,
        fee_token: Address = DEFAULT_FEE_TOKEN,
        fee_amount: int = DEFAULT_FEE_AMOUNT,
    ) -> RelayState:
        """Create the state a freshly deployed relay starts with.

        The deployer becomes owner and the only admin; all switches are off.

        Args:
            deployer: Identity initializing the relay.
            fee_token: Token the fee is collected in.
            fee_amount: Fee per connection request.

        Returns:
            A new RelayState.
        """
        return cls(
            owner=deployer,
            admins={deployer},
            fee_amount=fee_amount,
            fee_token=fee_token,
        )

    def is_owner(self, identity: Address) -> bool:
        return identity == self.owner

    def is_admin(self, identity: Address) -> bool:
        return identity in self.admins

    def is_paused(self, flag: PauseFlag) -> bool:
        """Read one of the three pause switches by name."""
        if flag is PauseFlag.REQUESTS:
            return self.requests_paused
        if flag is PauseFlag.RESPONSES:
            return self.responses_paused
        return self.admin_withdrawals_paused

    def set_paused(self, flag: PauseFlag, paused: bool) -> None:
        """Overwrite one of the three pause switches by name."""
        if flag is PauseFlag.REQUESTS:
            self.requests_paused = paused
        elif flag is PauseFlag.RESPONSES:
            self.responses_paused = paused
        else:
            self.admin_withdrawals_paused = paused

    def staged_copy(self) -> RelayState:
        """Return an independent working copy for a single operation.

        The admin set is copied so that changes to the copy never leak
        into the committed state.
        """
        return replace(self, admins=set(self.admins))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a read-only view for status endpoints.

        Returns:
            Dict with string addresses and a sorted admin list.
        """
        return {
            "owner": str(self.owner),
            "admins": sorted(str(admin) for admin in self.admins),
            "requests_paused": self.requests_paused,
            "responses_paused": self.responses_paused,
            "admin_withdrawals_paused": self.admin_withdrawals_paused,
            "fee_amount": self.fee_amount,
            "fee_token": str(self.fee_token),
        }

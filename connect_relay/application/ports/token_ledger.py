"""Token Ledger Port - the external value-transfer collaborator.

The relay collects fees in, and custodies, fungible tokens it does not
implement. This module defines the interface it consumes from such a
token and a gateway that resolves a token address to its ledger.

Conventions:
- Every operation that spends is performed on behalf of an explicit
  ``caller`` (the account whose authority is used).
- Transfer and approval operations report failure by returning False.
  They do not raise for business failures (insufficient balance or
  allowance). The relay translates False into TokenTransferFailedError.
- Successful transfers and approvals produce notifications that
  observers can read back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from connect_relay.domain.value_objects.address import Address


@dataclass(frozen=True)
class TokenTransferNotification:
    """Notification of a completed token transfer.

    Attributes:
        source: Account the tokens left.
        recipient: Account the tokens arrived at.
        amount: Amount moved in base units.
    """

    source: Address
    recipient: Address
    amount: int


@dataclass(frozen=True)
class TokenApprovalNotification:
    """Notification of an allowance being set.

    Attributes:
        holder: Account whose tokens may be spent.
        spender: Account allowed to spend them.
        amount: New allowance in base units.
    """

    holder: Address
    spender: Address
    amount: int


@runtime_checkable
class TokenLedgerProtocol(Protocol):
    """Protocol for a fungible token ledger.

    Usage:
        ok = await ledger.transfer_from(
            caller=relay_address,
            source=requester,
            recipient=relay_address,
            amount=fee,
        )
        if not ok:
            raise TokenTransferFailedError(ledger.address, fee, "transfer_from")
    """

    @property
    def address(self) -> Address:
        """Address identifying this token."""
        ...

    async def total_supply(self) -> int:
        """Total amount of the token in existence."""
        ...

    async def balance_of(self, holder: Address) -> int:
        """Amount held by an account."""
        ...

    async def transfer(self, caller: Address, recipient: Address, amount: int) -> bool:
        """Move tokens from the caller to a recipient.

        Returns:
            True on success, False on failure.
        """
        ...

    async def allowance(self, holder: Address, spender: Address) -> int:
        """Remaining amount a spender may move on behalf of a holder."""
        ...

    async def approve(self, caller: Address, spender: Address, amount: int) -> bool:
        """Allow a spender to move up to amount of the caller's tokens.

        Returns:
            True on success, False on failure.
        """
        ...

    async def transfer_from(
        self,
        caller: Address,
        source: Address,
        recipient: Address,
        amount: int,
    ) -> bool:
        """Move tokens from source to recipient using the caller's allowance.

        Returns:
            True on success, False on failure.
        """
        ...

    def transfer_notifications(self) -> list[TokenTransferNotification]:
        """Notifications for all successful transfers, oldest first."""
        ...

    def approval_notifications(self) -> list[TokenApprovalNotification]:
        """Notifications for all successful approvals, oldest first."""
        ...


@runtime_checkable
class TokenGatewayProtocol(Protocol):
    """Resolves token addresses to ledgers.

    Withdrawals name the token by address and may target any token the
    relay holds, not only the configured fee token.
    """

    def get_ledger(self, token: Address) -> TokenLedgerProtocol:
        """Return the ledger for a token address.

        Raises:
            InvalidArgumentError: If no token is known at the address.
        """
        ...

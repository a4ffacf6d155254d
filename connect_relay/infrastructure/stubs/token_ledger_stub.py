"""Token Ledger Stub: an in-memory fungible token.

Implements TokenLedgerProtocol with the usual fungible-token rules:
- transfer fails (returns False) when the caller's balance is short
- transfer_from fails when the source's balance or the caller's
  allowance is short, and spends the allowance on success
- approve overwrites the allowance

Test controls:
- mint() creates tokens out of nothing
- fail_transfers / fail_transfer_froms force False results
- calls records every spending call, successful or not
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from connect_relay.application.ports.token_ledger import (
    TokenApprovalNotification,
    TokenTransferNotification,
)
from connect_relay.domain.value_objects.address import NULL_ADDRESS, Address


@dataclass(frozen=True)
class TokenCall:
    """A recorded spending call made against the stub.

    Attributes:
        method: "transfer", "approve" or "transfer_from".
        arguments: Keyword arguments of the call.
        succeeded: The boolean result returned.
    """

    method: str
    arguments: dict[str, Any] = field(default_factory=dict)
    succeeded: bool = True


class TokenLedgerStub:
    """In-memory implementation of TokenLedgerProtocol.

    Attributes:
        fail_transfers: Force transfer() to return False.
        fail_transfer_froms: Force transfer_from() to return False.
        calls: Every transfer/approve/transfer_from call, oldest first.
    """

    def __init__(self, address: Address) -> None:
        """Initialize an empty token.

        Args:
            address: Address identifying this token.
        """
        self._address = address
        self._balances: dict[Address, int] = {}
        self._allowances: dict[tuple[Address, Address], int] = {}
        self._total_supply = 0
        self._transfers: list[TokenTransferNotification] = []
        self._approvals: list[TokenApprovalNotification] = []
        self.fail_transfers = False
        self.fail_transfer_froms = False
        self.calls: list[TokenCall] = []

    @property
    def address(self) -> Address:
        return self._address

    # =========================================================================
    # TokenLedgerProtocol
    # =========================================================================

    async def total_supply(self) -> int:
        return self._total_supply

    async def balance_of(self, holder: Address) -> int:
        return self._balances.get(holder, 0)

    async def transfer(self, caller: Address, recipient: Address, amount: int) -> bool:
        ok = not self.fail_transfers and self._move(caller, recipient, amount)
        self.calls.append(
            TokenCall(
                "transfer",
                {"caller": caller, "recipient": recipient, "amount": amount},
                ok,
            )
        )
        return ok

    async def allowance(self, holder: Address, spender: Address) -> int:
        return self._allowances.get((holder, spender), 0)

    async def approve(self, caller: Address, spender: Address, amount: int) -> bool:
        ok = not spender.is_null and amount >= 0
        if ok:
            self._allowances[(caller, spender)] = amount
            self._approvals.append(
                TokenApprovalNotification(holder=caller, spender=spender, amount=amount)
            )
        self.calls.append(
            TokenCall(
                "approve",
                {"caller": caller, "spender": spender, "amount": amount},
                ok,
            )
        )
        return ok

    async def transfer_from(
        self,
        caller: Address,
        source: Address,
        recipient: Address,
        amount: int,
    ) -> bool:
        allowed = self._allowances.get((source, caller), 0)
        ok = (
            not self.fail_transfer_froms
            and allowed >= amount
            and self._move(source, recipient, amount)
        )
        if ok:
            self._allowances[(source, caller)] = allowed - amount
        self.calls.append(
            TokenCall(
                "transfer_from",
                {
                    "caller": caller,
                    "source": source,
                    "recipient": recipient,
                    "amount": amount,
                },
                ok,
            )
        )
        return ok

    def transfer_notifications(self) -> list[TokenTransferNotification]:
        return list(self._transfers)

    def approval_notifications(self) -> list[TokenApprovalNotification]:
        return list(self._approvals)

    # =========================================================================
    # Test controls
    # =========================================================================

    def mint(self, holder: Address, amount: int) -> None:
        """Create tokens for a holder (for testing).

        Recorded as a transfer from the null address.
        """
        self._balances[holder] = self._balances.get(holder, 0) + amount
        self._total_supply += amount
        self._transfers.append(
            TokenTransferNotification(source=NULL_ADDRESS, recipient=holder, amount=amount)
        )

    def calls_to(self, method: str) -> list[TokenCall]:
        return [call for call in self.calls if call.method == method]

    def _move(self, source: Address, recipient: Address, amount: int) -> bool:
        if recipient.is_null or amount < 0:
            return False
        balance = self._balances.get(source, 0)
        if balance < amount:
            return False
        self._balances[source] = balance - amount
        self._balances[recipient] = self._balances.get(recipient, 0) + amount
        self._transfers.append(
            TokenTransferNotification(source=source, recipient=recipient, amount=amount)
        )
        return True

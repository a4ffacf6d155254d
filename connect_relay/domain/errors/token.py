"""Errors at the token collaborator boundary.

The token collaborator reports failure with a boolean result. The relay
translates a False result into TokenTransferFailedError so that no
failure passes silently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from connect_relay.domain.exceptions import RelayError

if TYPE_CHECKING:
    from connect_relay.domain.value_objects.address import Address


class TokenTransferFailedError(RelayError):
    """Raised when the token collaborator reports a failed transfer.

    Attributes:
        token: Address of the token whose transfer failed.
        amount: Amount that was to be moved.
    """

    def __init__(self, token: Address, amount: int, operation: str = "transfer") -> None:
        """Initialize transfer failure.

        Args:
            token: Address of the token whose transfer failed.
            amount: Amount that was to be moved.
            operation: Token operation that failed ("transfer" or "transfer_from").
        """
        self.token = token
        self.amount = amount
        self.operation = operation
        super().__init__(f"Token {token} {operation} of {amount} failed")


class InsufficientBalanceError(RelayError):
    """Raised when the relay holds less of a token than a withdrawal asks for.

    Checked before any transfer is attempted.

    Attributes:
        token: Address of the token.
        available: Balance the relay holds.
        requested: Amount the withdrawal asked for.
    """

    def __init__(self, token: Address, available: int, requested: int) -> None:
        self.token = token
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient balance of token {token}: "
            f"holds {available}, requested {requested}"
        )

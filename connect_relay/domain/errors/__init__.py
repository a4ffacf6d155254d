"""Domain errors for Connect Relay.

Provides specific exception classes for each rejection cause.
All exceptions inherit from RelayError.
"""

from connect_relay.domain.errors.access import UnauthorizedError
from connect_relay.domain.errors.argument import InvalidArgumentError
from connect_relay.domain.errors.membership import (
    AdminAlreadyExistsError,
    AdminNotFoundError,
)
from connect_relay.domain.errors.pause import OperationPausedError
from connect_relay.domain.errors.token import (
    InsufficientBalanceError,
    TokenTransferFailedError,
)

__all__: list[str] = [
    "AdminAlreadyExistsError",
    "AdminNotFoundError",
    "InsufficientBalanceError",
    "InvalidArgumentError",
    "OperationPausedError",
    "TokenTransferFailedError",
    "UnauthorizedError",
]

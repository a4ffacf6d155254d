"""Argument validation errors."""

from connect_relay.domain.exceptions import RelayError


class InvalidArgumentError(RelayError):
    """Raised when an argument is outside what the operation accepts.

    Covers the null address where a real identity is required, a request
    or response addressed to the caller itself, a non-positive withdrawal
    amount, a negative fee and malformed address strings.

    Usage:
        raise InvalidArgumentError("Recipient must not be the null address")
    """

    pass

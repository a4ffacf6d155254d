"""Base exception classes for the Connect Relay domain layer."""


class RelayError(Exception):
    """Base exception for all relay domain errors.

    Every failure aborts the whole operation: no state is changed and no
    record is emitted. Callers may resubmit once the cause is resolved
    (e.g. after unpausing or after raising a token allowance).
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)

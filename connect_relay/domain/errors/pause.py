"""Pause switch errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from connect_relay.domain.exceptions import RelayError

if TYPE_CHECKING:
    from connect_relay.domain.value_objects.pause_flag import PauseFlag


class OperationPausedError(RelayError):
    """Raised when an operation is blocked by its pause switch.

    The caller may resubmit after the switch is cleared.

    Attributes:
        flag: The pause switch that blocked the operation.
    """

    def __init__(self, flag: PauseFlag) -> None:
        """Initialize paused error.

        Args:
            flag: The pause switch that blocked the operation.
        """
        self.flag = flag
        super().__init__(f"Operation blocked: {flag.value} are paused")

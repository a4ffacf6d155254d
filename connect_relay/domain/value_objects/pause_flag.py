"""The three independent pause switches."""

from enum import Enum


class PauseFlag(str, Enum):
    """Names of the pause switches held in RelayState.

    Each flag disables one category of operation without affecting the
    others.
    """

    REQUESTS = "requests"
    RESPONSES = "responses"
    ADMIN_WITHDRAWALS = "admin_withdrawals"

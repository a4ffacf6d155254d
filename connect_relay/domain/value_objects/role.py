"""Privilege roles checked by the access guards."""

from enum import Enum


class Role(str, Enum):
    """Role a caller must hold for a guarded operation.

    OWNER is the single top-privilege identity. ADMIN is membership of
    the admin set. ADMIN_OR_OWNER is satisfied by either.
    """

    OWNER = "owner"
    ADMIN = "admin"
    ADMIN_OR_OWNER = "admin_or_owner"

"""Address value object.

Identities (owner, admins, senders, recipients and token contracts) are
20-byte account addresses written as ``0x``-prefixed hex strings.
Addresses compare case-insensitively; the canonical form is lower-case.
The all-zero address is the null identity.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from connect_relay.domain.errors.argument import InvalidArgumentError

_ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")

NULL_ADDRESS_HEX = "0x" + "0" * 40


@dataclass(frozen=True, order=True)
class Address:
    """A 20-byte account address.

    Attributes:
        value: Canonical lower-case ``0x``-prefixed hex string.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and canonicalize the hex string."""
        if not isinstance(self.value, str) or not _ADDRESS_PATTERN.fullmatch(
            self.value
        ):
            raise InvalidArgumentError(f"Malformed address: {self.value!r}")
        object.__setattr__(self, "value", self.value.lower())

    @classmethod
    def parse(cls, raw: str | Address) -> Address:
        """Build an Address from a string, passing Address instances through.

        Args:
            raw: Hex string or an existing Address.

        Returns:
            The canonical Address.

        Raises:
            InvalidArgumentError: If the string is not a 20-byte hex address.
        """
        if isinstance(raw, Address):
            return raw
        return cls(raw.strip() if isinstance(raw, str) else raw)

    @property
    def is_null(self) -> bool:
        """True for the all-zero address."""
        return self.value == NULL_ADDRESS_HEX

    def __str__(self) -> str:
        return self.value


# The null identity
NULL_ADDRESS = Address(NULL_ADDRESS_HEX)

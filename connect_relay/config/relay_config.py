"""Relay configuration.

Environment Variables:
- RELAY_ADDRESS: Account that holds collected fees
- RELAY_DEPLOYER_ADDRESS: Initial owner and admin
- RELAY_DEFAULT_FEE_TOKEN: Fee token at initialization
- RELAY_DEFAULT_FEE_AMOUNT: Fee per request at initialization (default: 10**19)
- ENVIRONMENT: "production" for JSON logs, anything else for console logs
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from connect_relay.domain.models.relay_state import (
    DEFAULT_FEE_AMOUNT,
    DEFAULT_FEE_TOKEN,
)
from connect_relay.domain.value_objects.address import Address

DEFAULT_RELAY_ADDRESS = Address("0x00000000000000000000000000000000000c0de1")

DEFAULT_DEPLOYER_ADDRESS = Address("0x00000000000000000000000000000000000d3b10")


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_address_env(key: str, default: Address) -> Address:
    """Get address environment variable with default.

    Raises:
        InvalidArgumentError: If the variable is set but malformed.
    """
    value = os.environ.get(key)
    if not value:
        return default
    return Address.parse(value)


@dataclass(frozen=True)
class RelayConfig:
    """Configuration for one relay instance.

    Attributes:
        relay_address: Account that holds collected fees.
        deployer_address: Initial owner and only initial admin.
        default_fee_token: Fee token at initialization.
        default_fee_amount: Fee per request at initialization.
        environment: Logging mode selector.
    """

    relay_address: Address = DEFAULT_RELAY_ADDRESS
    deployer_address: Address = DEFAULT_DEPLOYER_ADDRESS
    default_fee_token: Address = DEFAULT_FEE_TOKEN
    default_fee_amount: int = DEFAULT_FEE_AMOUNT
    environment: str = "development"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.relay_address.is_null:
            raise ValueError("relay_address must not be the null address")
        if self.deployer_address.is_null:
            raise ValueError("deployer_address must not be the null address")
        if self.default_fee_token.is_null:
            raise ValueError("default_fee_token must not be the null address")
        if self.default_fee_amount < 0:
            raise ValueError(
                f"default_fee_amount must be non-negative, got {self.default_fee_amount}"
            )

    @classmethod
    def from_environment(cls) -> RelayConfig:
        """Create config from environment variables with defaults."""
        return cls(
            relay_address=_get_address_env("RELAY_ADDRESS", DEFAULT_RELAY_ADDRESS),
            deployer_address=_get_address_env(
                "RELAY_DEPLOYER_ADDRESS", DEFAULT_DEPLOYER_ADDRESS
            ),
            default_fee_token=_get_address_env(
                "RELAY_DEFAULT_FEE_TOKEN", DEFAULT_FEE_TOKEN
            ),
            default_fee_amount=_get_int_env(
                "RELAY_DEFAULT_FEE_AMOUNT", DEFAULT_FEE_AMOUNT
            ),
            environment=os.environ.get("ENVIRONMENT", "development"),
        )


# Default configuration instance
DEFAULT_RELAY_CONFIG = RelayConfig()

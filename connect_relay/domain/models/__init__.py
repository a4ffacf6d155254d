"""Domain models for the relay."""

from connect_relay.domain.models.relay_state import (
    DEFAULT_FEE_AMOUNT,
    DEFAULT_FEE_TOKEN,
    RelayState,
)

__all__: list[str] = ["DEFAULT_FEE_AMOUNT", "DEFAULT_FEE_TOKEN", "RelayState"]

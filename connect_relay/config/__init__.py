"""Configuration module for Connect Relay.

Available Configurations:
- RelayConfig: relay custody address, initial owner and fee defaults
"""

from connect_relay.config.relay_config import (
    DEFAULT_RELAY_CONFIG,
    RelayConfig,
)

__all__ = ["DEFAULT_RELAY_CONFIG", "RelayConfig"]

"""FastAPI dependencies."""

from connect_relay.api.dependencies.relay import (
    get_caller,
    get_relay,
    get_relay_container,
    reset_relay_container,
    set_relay_container,
)

__all__: list[str] = [
    "get_caller",
    "get_relay",
    "get_relay_container",
    "reset_relay_container",
    "set_relay_container",
]

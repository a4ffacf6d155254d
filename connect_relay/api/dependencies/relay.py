"""Relay API dependencies.

Dependency injection for the relay. A single relay instance is built on
first use from RelayConfig.from_environment() over in-memory stubs.
Tests install their own container with set_relay_container().

The caller identity is the address in the X-Caller-Address header. The
relay does not verify identity beyond that.
"""

from fastapi import Header, HTTPException

from connect_relay.application.services.connection_relay import ConnectionRelay
from connect_relay.bootstrap.relay import RelayContainer, build_relay
from connect_relay.config.relay_config import RelayConfig
from connect_relay.domain.exceptions import RelayError
from connect_relay.domain.value_objects.address import Address

CALLER_HEADER = "X-Caller-Address"

_relay_container: RelayContainer | None = None


def get_relay_container() -> RelayContainer:
    """Get the relay container, building it on first use."""
    global _relay_container
    if _relay_container is None:
        _relay_container = build_relay(RelayConfig.from_environment())
    return _relay_container


def set_relay_container(container: RelayContainer) -> None:
    """Install a relay container (for testing)."""
    global _relay_container
    _relay_container = container


def reset_relay_container() -> None:
    """Drop the relay container so the next call rebuilds it."""
    global _relay_container
    _relay_container = None


def get_relay() -> ConnectionRelay:
    return get_relay_container().relay


def get_caller(
    x_caller_address: str = Header(..., alias=CALLER_HEADER),
) -> Address:
    """Parse the calling address from the request header.

    Raises:
        HTTPException 400: If the header is not a valid address.
    """
    try:
        return Address.parse(x_caller_address)
    except RelayError as exc:
        raise HTTPException(
            status_code=400,
            detail={
                "type": "urn:connect-relay:invalid-argument",
                "title": "Invalid Caller Address",
                "status": 400,
                "detail": str(exc),
            },
        ) from None

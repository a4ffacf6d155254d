"""Read-only relay routes.

Anyone may read the relay parameters, the records published so far and
the relay's holdings of a token.
"""

from fastapi import APIRouter, Depends, Request

from connect_relay.api.dependencies.relay import get_relay_container
from connect_relay.api.errors import relay_error_to_http
from connect_relay.api.models.relay import (
    RecordListResponse,
    RecordResponse,
    RelayStateResponse,
    TokenBalanceResponse,
)
from connect_relay.bootstrap.relay import RelayContainer
from connect_relay.domain.exceptions import RelayError
from connect_relay.domain.value_objects.address import Address

router = APIRouter(prefix="/v1/relay", tags=["relay-state"])


@router.get("/state", response_model=RelayStateResponse)
async def get_state(
    container: RelayContainer = Depends(get_relay_container),
) -> RelayStateResponse:
    view = container.relay.snapshot().to_dict()
    return RelayStateResponse(
        owner=view["owner"],
        admins=view["admins"],
        requests_paused=view["requests_paused"],
        responses_paused=view["responses_paused"],
        admin_withdrawals_paused=view["admin_withdrawals_paused"],
        fee_amount=str(view["fee_amount"]),
        fee_token=view["fee_token"],
        relay_address=str(container.relay.relay_address),
    )


@router.get("/records", response_model=RecordListResponse)
async def list_records(
    event_type: str | None = None,
    container: RelayContainer = Depends(get_relay_container),
) -> RecordListResponse:
    """List published records, optionally filtered by record type."""
    records = [
        RecordResponse(event_type=r.event_type, record=r.to_dict())
        for r in container.publisher.records
        if event_type is None or r.event_type == event_type
    ]
    return RecordListResponse(records=records, total=len(records))


@router.get("/balances/{token}", response_model=TokenBalanceResponse)
async def get_custody_balance(
    token: str,
    request: Request,
    container: RelayContainer = Depends(get_relay_container),
) -> TokenBalanceResponse:
    try:
        address = Address.parse(token)
        balance = await container.relay.custody_balance(address)
    except RelayError as exc:
        raise relay_error_to_http(exc, request) from None
    return TokenBalanceResponse(token=str(address), balance=str(balance))

"""Privileged relay management routes.

Role management, pause switches, fee parameters and withdrawals. The
relay enforces the role each operation needs; these routes only parse
input and translate errors.
"""

from collections.abc import Awaitable

from fastapi import APIRouter, Depends, Request

from connect_relay.api.dependencies.relay import get_caller, get_relay
from connect_relay.api.errors import relay_error_to_http
from connect_relay.api.models.relay import (
    AddressRequest,
    FeeRequest,
    PauseRequest,
    RecordResponse,
    WithdrawalRequest,
)
from connect_relay.application.services.connection_relay import ConnectionRelay
from connect_relay.domain.events.record import RelayRecord
from connect_relay.domain.exceptions import RelayError
from connect_relay.domain.value_objects.address import Address

router = APIRouter(prefix="/v1/relay", tags=["relay-admin"])


async def _run(call: Awaitable[RelayRecord], request: Request) -> RecordResponse:
    try:
        record = await call
    except RelayError as exc:
        raise relay_error_to_http(exc, request) from None
    return RecordResponse(event_type=record.event_type, record=record.to_dict())


def _parse(raw: str, request: Request) -> Address:
    try:
        return Address.parse(raw)
    except RelayError as exc:
        raise relay_error_to_http(exc, request) from None


@router.post("/ownership", response_model=RecordResponse, summary="Transfer ownership")
async def transfer_ownership(
    body: AddressRequest,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    return await _run(
        relay.transfer_ownership(caller, _parse(body.address, request)), request
    )


@router.post(
    "/admins", response_model=RecordResponse, status_code=201, summary="Add an admin"
)
async def add_admin(
    body: AddressRequest,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    return await _run(relay.add_admin(caller, _parse(body.address, request)), request)


@router.post(
    "/admins/resign", response_model=RecordResponse, summary="Resign own admin role"
)
async def resign_admin(
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    return await _run(relay.resign_admin(caller), request)


@router.delete(
    "/admins/{address}", response_model=RecordResponse, summary="Remove an admin"
)
async def remove_admin(
    address: str,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    return await _run(relay.remove_admin(caller, _parse(address, request)), request)


@router.put("/pause/requests", response_model=RecordResponse)
async def set_requests_paused(
    body: PauseRequest,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    return await _run(relay.set_requests_paused(caller, body.paused), request)


@router.put("/pause/responses", response_model=RecordResponse)
async def set_responses_paused(
    body: PauseRequest,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    return await _run(relay.set_responses_paused(caller, body.paused), request)


@router.put("/pause/admin-withdrawals", response_model=RecordResponse)
async def set_admin_withdrawals_paused(
    body: PauseRequest,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    return await _run(relay.set_admin_withdrawals_paused(caller, body.paused), request)


@router.put("/fee", response_model=RecordResponse, summary="Set the request fee")
async def set_request_fee(
    body: FeeRequest,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    return await _run(relay.set_request_fee(caller, body.amount), request)


@router.put("/fee-token", response_model=RecordResponse, summary="Set the fee token")
async def set_fee_token(
    body: AddressRequest,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    return await _run(
        relay.set_fee_token(caller, _parse(body.address, request)), request
    )


@router.post(
    "/withdrawals",
    response_model=RecordResponse,
    status_code=201,
    summary="Withdraw held tokens",
)
async def withdraw_tokens(
    body: WithdrawalRequest,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    return await _run(
        relay.withdraw_tokens(
            caller,
            token=_parse(body.token, request),
            amount=body.amount,
            recipient=_parse(body.recipient, request),
        ),
        request,
    )

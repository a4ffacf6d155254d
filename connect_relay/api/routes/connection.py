"""Connection API routes.

Public endpoints for emitting connection requests and responses. Any
address may call them; requests are charged the current fee in the fee
token via a previously granted allowance.
"""

from fastapi import APIRouter, Depends, Request

from connect_relay.api.dependencies.relay import get_caller, get_relay
from connect_relay.api.errors import relay_error_to_http
from connect_relay.api.models.relay import (
    ConnectionRequestBody,
    ConnectionResponseBody,
    RecordResponse,
)
from connect_relay.application.services.connection_relay import ConnectionRelay
from connect_relay.domain.exceptions import RelayError
from connect_relay.domain.value_objects.address import Address

router = APIRouter(prefix="/v1/connections", tags=["connections"])


@router.post(
    "/requests",
    response_model=RecordResponse,
    status_code=201,
    summary="Send a connection request",
    description=(
        "Collect the request fee from the caller and emit a connection "
        "request record addressed to the recipient."
    ),
)
async def send_connection_request(
    body: ConnectionRequestBody,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    """Emit a connection request.

    Raises:
        HTTPException 400: Null or self recipient
        HTTPException 502: Fee could not be collected
        HTTPException 503: Requests are paused
    """
    try:
        record = await relay.send_connection_request(
            caller=caller,
            to=Address.parse(body.to),
            public_key=body.public_key,
            payload=body.payload,
        )
    except RelayError as exc:
        raise relay_error_to_http(exc, request) from None
    return RecordResponse(event_type=record.event_type, record=record.to_dict())


@router.post(
    "/responses",
    response_model=RecordResponse,
    status_code=201,
    summary="Send a connection response",
)
async def send_connection_response(
    body: ConnectionResponseBody,
    request: Request,
    caller: Address = Depends(get_caller),
    relay: ConnectionRelay = Depends(get_relay),
) -> RecordResponse:
    """Emit a connection response.

    Raises:
        HTTPException 400: Null or self recipient
        HTTPException 503: Responses are paused
    """
    try:
        record = await relay.send_connection_response(
            caller=caller,
            to=Address.parse(body.to),
            response=body.response,
        )
    except RelayError as exc:
        raise relay_error_to_http(exc, request) from None
    return RecordResponse(event_type=record.event_type, record=record.to_dict())

"""Pydantic request/response models for the relay API."""

from connect_relay.api.models.relay import (
    AddressRequest,
    ConnectionRequestBody,
    ConnectionResponseBody,
    FeeRequest,
    PauseRequest,
    RecordListResponse,
    RecordResponse,
    RelayStateResponse,
    TokenBalanceResponse,
    WithdrawalRequest,
)

__all__: list[str] = [
    "AddressRequest",
    "ConnectionRequestBody",
    "ConnectionResponseBody",
    "FeeRequest",
    "PauseRequest",
    "RecordListResponse",
    "RecordResponse",
    "RelayStateResponse",
    "TokenBalanceResponse",
    "WithdrawalRequest",
]

"""Relay API request/response models.

Addresses travel as 0x-prefixed hex strings and are parsed by the route
handlers, so a malformed address is reported as an invalid argument.
Opaque byte values (payloads, responses) travel as 0x-prefixed hex.
Token amounts are accepted as integers and rendered as strings, since
they routinely exceed 2**53.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


def _decode_hex(value: str) -> bytes:
    text = value[2:] if value.startswith("0x") else value
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise ValueError("must be a hex string") from exc


class ConnectionRequestBody(BaseModel):
    """Connection request to emit.

    Attributes:
        to: Recipient address.
        public_key: Public key the sender declares for the response.
        payload: Opaque payload as hex.
    """

    to: str = Field(..., description="Recipient address")
    public_key: str = Field(..., description="Sender's declared public key")
    payload: bytes = Field(default=b"", description="Opaque payload (hex)")

    @field_validator("payload", mode="before")
    @classmethod
    def _payload_from_hex(cls, value: Any) -> Any:
        return _decode_hex(value) if isinstance(value, str) else value


class ConnectionResponseBody(BaseModel):
    """Connection response to emit."""

    to: str = Field(..., description="Recipient address (the requester)")
    response: bytes = Field(default=b"", description="Opaque response value (hex)")

    @field_validator("response", mode="before")
    @classmethod
    def _response_from_hex(cls, value: Any) -> Any:
        return _decode_hex(value) if isinstance(value, str) else value


class AddressRequest(BaseModel):
    """Body naming a single address (admin, new owner or fee token)."""

    address: str = Field(..., description="Target address")


class PauseRequest(BaseModel):
    """New value of a pause switch."""

    paused: bool


class FeeRequest(BaseModel):
    """New per-request fee in token base units."""

    amount: int


class WithdrawalRequest(BaseModel):
    """Withdrawal of a held token."""

    token: str = Field(..., description="Token address")
    amount: int = Field(..., description="Amount in base units")
    recipient: str = Field(..., description="Address receiving the tokens")


class RecordResponse(BaseModel):
    """A record emitted by a successful call."""

    event_type: str
    record: dict[str, Any]


class RecordListResponse(BaseModel):
    """Records published so far, oldest first."""

    records: list[RecordResponse]
    total: int


class RelayStateResponse(BaseModel):
    """Read-only view of the relay parameters."""

    owner: str
    admins: list[str]
    requests_paused: bool
    responses_paused: bool
    admin_withdrawals_paused: bool
    fee_amount: str
    fee_token: str
    relay_address: str


class TokenBalanceResponse(BaseModel):
    """Amount of a token held by the relay."""

    token: str
    balance: str

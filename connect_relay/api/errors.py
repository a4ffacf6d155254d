"""Translation of relay domain errors into RFC 7807 HTTP errors.

| Error | Status |
|---|---|
| UnauthorizedError | 403 |
| InvalidArgumentError | 400 |
| AdminAlreadyExistsError | 409 |
| AdminNotFoundError | 404 |
| OperationPausedError | 503 |
| InsufficientBalanceError | 409 |
| TokenTransferFailedError | 502 |
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request

from connect_relay.domain.errors import (
    AdminAlreadyExistsError,
    AdminNotFoundError,
    InsufficientBalanceError,
    InvalidArgumentError,
    OperationPausedError,
    TokenTransferFailedError,
    UnauthorizedError,
)
from connect_relay.domain.exceptions import RelayError

_ERROR_TABLE: list[tuple[type[RelayError], int, str, str]] = [
    (UnauthorizedError, 403, "unauthorized", "Unauthorized"),
    (InvalidArgumentError, 400, "invalid-argument", "Invalid Argument"),
    (AdminAlreadyExistsError, 409, "admin-already-exists", "Admin Already Exists"),
    (AdminNotFoundError, 404, "admin-not-found", "Admin Not Found"),
    (OperationPausedError, 503, "paused", "Operation Paused"),
    (InsufficientBalanceError, 409, "insufficient-balance", "Insufficient Balance"),
    (TokenTransferFailedError, 502, "transfer-failed", "Token Transfer Failed"),
]


def relay_error_to_http(exc: RelayError, request: Request) -> HTTPException:
    """Build the HTTPException for a rejected relay call.

    Args:
        exc: The domain error raised by the relay.
        request: Request being served, used for the problem instance.

    Returns:
        HTTPException with an RFC 7807 detail body.
    """
    status, slug, title = 500, "relay-error", "Relay Error"
    for error_type, error_status, error_slug, error_title in _ERROR_TABLE:
        if isinstance(exc, error_type):
            status, slug, title = error_status, error_slug, error_title
            break

    detail: dict[str, Any] = {
        "type": f"urn:connect-relay:{slug}",
        "title": title,
        "status": status,
        "detail": str(exc),
        "instance": str(request.url),
    }
    if isinstance(exc, UnauthorizedError):
        detail["required_role"] = exc.required_role.value
    elif isinstance(exc, OperationPausedError):
        detail["paused"] = exc.flag.value
    elif isinstance(exc, InsufficientBalanceError):
        detail["available"] = str(exc.available)
        detail["requested"] = str(exc.requested)

    return HTTPException(status_code=status, detail=detail)

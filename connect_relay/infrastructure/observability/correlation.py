"""Correlation IDs tying together the log entries of one relay call.

The HTTP middleware sets the ID from the X-Correlation-ID header. Callers
that drive ConnectionRelay directly get a fresh ID per mutating call from
correlation_scope(), so every guard, token and publish log line of that
call can be joined on it.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("relay_correlation_id", default="")


def generate_correlation_id() -> str:
    """New UUID4 correlation ID."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Correlation ID of the current context, or "" outside any call."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope() -> Iterator[str]:
    """Keep the caller's correlation ID, or open a new one for this block.

    A generated ID is discarded when the block exits so it never leaks
    into the next call made from the same context.

    Yields:
        The correlation ID in effect inside the block.
    """
    current = _correlation_id.get()
    if current:
        yield current
        return

    token = _correlation_id.set(generate_correlation_id())
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id when one is set."""
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict

"""Structured logging shared by the relay services.

Every service logger carries ``service`` and ``component``. Operation
loggers add ``operation`` and the current ``correlation_id``, and render
Address and enum values to plain strings so log processors and the JSON
renderer never see domain objects.
"""

from enum import Enum

import structlog

from connect_relay.domain.value_objects.address import Address
from connect_relay.infrastructure.observability.correlation import get_correlation_id


def _loggable(value: object) -> object:
    if isinstance(value, Address):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


class LoggingMixin:
    """Mixin giving a service a bound structlog logger.

    Attributes:
        _log: Logger bound with the service class name and component.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "relay") -> None:
        """Bind the service logger. Call at the end of __init__."""
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Logger for one relay operation.

        Args:
            operation: Relay operation name, e.g. "withdraw_tokens".
            **context: Extra fields. Address values are logged as their
                canonical hex string.

        Returns:
            BoundLogger with operation, correlation ID and context.
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **{key: _loggable(value) for key, value in context.items()},
        )

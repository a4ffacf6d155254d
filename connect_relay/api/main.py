"""FastAPI application entry point for Connect Relay."""

from fastapi import FastAPI

from connect_relay import __version__
from connect_relay.api.middleware.logging_middleware import LoggingMiddleware
from connect_relay.api.routes.admin import router as admin_router
from connect_relay.api.routes.connection import router as connection_router
from connect_relay.api.routes.metrics import router as metrics_router
from connect_relay.api.routes.state import router as state_router
from connect_relay.bootstrap.logging import configure_structlog
from connect_relay.config.relay_config import RelayConfig


def create_app(config: RelayConfig | None = None) -> FastAPI:
    """Build the relay API application.

    Args:
        config: Configuration used for logging setup; read from the
            environment when omitted.
    """
    config = config or RelayConfig.from_environment()
    configure_structlog(config.environment)

    app = FastAPI(
        title="Connect Relay API",
        description="Gated connection request/response relay",
        version=__version__,
    )
    app.add_middleware(LoggingMiddleware)
    app.include_router(connection_router)
    app.include_router(admin_router)
    app.include_router(state_router)
    app.include_router(metrics_router)
    return app


app = create_app()

"""Metrics endpoint for Prometheus scraping."""

from fastapi import APIRouter, Depends, Response

from connect_relay.api.dependencies.relay import get_relay_container
from connect_relay.bootstrap.relay import RelayContainer
from connect_relay.infrastructure.monitoring.metrics import METRICS_CONTENT_TYPE

router = APIRouter(prefix="/v1", tags=["metrics"])


@router.get(
    "/metrics",
    summary="Prometheus metrics endpoint",
    response_class=Response,
    responses={
        200: {
            "description": "Metrics in Prometheus format",
            "content": {"text/plain": {}},
        }
    },
)
async def get_metrics(
    container: RelayContainer = Depends(get_relay_container),
) -> Response:
    """Relay record and rejection counters in Prometheus format."""
    return Response(
        content=container.metrics.generate_metrics(),
        media_type=METRICS_CONTENT_TYPE,
    )

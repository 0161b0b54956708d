"""
Observability endpoints for HueWheel.

Exposes the Prometheus metrics recorded by name lookups, harmony requests
and section analyses.
"""

from fastapi import APIRouter
from fastapi.responses import Response

from ..services.observability import get_metrics_collector


router = APIRouter(tags=["observability"])


@router.get("/metrics")
async def get_metrics() -> Response:
    """Prometheus text exposition of the service metrics."""
    metrics = get_metrics_collector()
    return Response(content=metrics.get_metrics(), media_type=metrics.content_type)

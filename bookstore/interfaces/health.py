"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
It is the only route served without the access token.
"""

from fastapi import APIRouter, Depends

from bookstore.core.context import AppContext
from bookstore.interfaces.dependencies import get_context
from bookstore.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(context: AppContext = Depends(get_context)) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=context.settings.version)

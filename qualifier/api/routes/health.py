"""
Health Check Routes - System health endpoint.

Used for load balancer health checks and quick status verification.
It does not check Gemini connectivity.
"""
from fastapi import APIRouter, Depends

from qualifier.api.dependencies import get_app_settings
from qualifier.core.config import Settings
from qualifier.core.logging_config import get_logger
from qualifier.models.envelope import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns 200 with is_success=true whenever the service is up."
)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Perform a basic health check."""
    logger.debug("Health check requested")

    return HealthResponse(
        is_success=True,
        official_email=settings.official_email,
    )

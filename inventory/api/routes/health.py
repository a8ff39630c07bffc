"""Health check endpoints.

Liveness is static; readiness pings the database.
"""

from fastapi import APIRouter

from inventory import __version__
from inventory.config import settings
from inventory.infra.database import verify_db_connection
from inventory.infra.logging import get_logger
from inventory.schemas.common import HealthResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Basic health check.

    Returns 200 if service is running.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={},
    )


@router.get("/health/ready", response_model=HealthResponse)
async def health_ready() -> HealthResponse:
    """Readiness check.

    Verifies the database accepts queries.
    """
    checks: dict[str, bool] = {"database": await verify_db_connection()}

    all_healthy = all(checks.values())
    if not all_healthy:
        logger.warning("Readiness check degraded", checks=checks)

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        version=__version__,
        environment=settings.environment,
        checks=checks,
    )


@router.get("/health/live", response_model=HealthResponse)
async def health_live() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={"alive": True},
    )

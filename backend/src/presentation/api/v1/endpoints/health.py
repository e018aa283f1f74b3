"""Liveness endpoint of the back office API."""

from fastapi import APIRouter

from presentation.schemas import HealthResponse
from infrastructure.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the service is up, with its name, version and environment."""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

"""Health check endpoint."""

from fastapi import APIRouter

from presentation.schemas import HealthResponse
from infrastructure.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.
    
    Reports the service identity and whether notification mail can be sent.
    """
    settings = get_settings()
    
    return HealthResponse(
        status="healthy",
        name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        notifications_enabled=settings.smtp_configured,
    )

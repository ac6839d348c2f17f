"""Health check and monitoring endpoints."""
from datetime import datetime, timezone
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import settings, PlatformConfig
from app.models.responses import (
    HealthData, DependencyStatus, HealthMetrics,
    SupportedPlatformsData, PlatformFeatures
)

router = APIRouter(tags=["health"])

service_start_time = datetime.now()

@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": f"{settings.api_title} is running"}

@router.get("/health")
async def health_check():
    """
    Health check endpoint with dependency status and uptime
    """
    uptime = int((datetime.now() - service_start_time).total_seconds())

    health_data = HealthData(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.api_version,
        dependencies=DependencyStatus(
            requests="healthy",
            beautifulsoup="healthy"
        ),
        metrics=HealthMetrics(uptime_seconds=uptime)
    )

    return JSONResponse(
        status_code=200,
        content=health_data.model_dump()
    )

@router.get("/supported-platforms")
async def get_supported_platforms():
    """
    Get platforms with a dedicated inline-script fallback and their capabilities
    """
    platforms = []
    for platform_name, config in PlatformConfig.SUPPORTED_PLATFORMS.items():
        platforms.append(PlatformFeatures(
            name=platform_name,
            domain=PlatformConfig.get_platform_domains(platform_name)[0],  # Primary domain
            supported_features=PlatformConfig.get_platform_features(platform_name),
            url_patterns=config["url_patterns"]
        ))

    platforms_data = SupportedPlatformsData(platforms=platforms)

    return JSONResponse(
        status_code=200,
        content=platforms_data.model_dump()
    )

"""Response models for the Social Media Extractor."""
from typing import Optional, List
from pydantic import BaseModel

from .extraction import ExtractionResult

class FetchResponse(BaseModel):
    """Successful /api/fetch response body."""
    ok: bool = True
    video: str
    caption: str
    thumbnail: Optional[str] = None
    source: str

    @classmethod
    def from_result(cls, result: ExtractionResult) -> "FetchResponse":
        return cls(
            video=result.video_url,
            caption=result.caption,
            thumbnail=result.thumbnail,
            source=result.source,
        )

class ErrorResponse(BaseModel):
    """Error response body."""
    error: str

class PlatformFeatures(BaseModel):
    """Platform feature description."""
    name: str
    domain: str
    supported_features: List[str]
    url_patterns: List[str]

class SupportedPlatformsData(BaseModel):
    """Supported platforms information."""
    platforms: List[PlatformFeatures]

class DependencyStatus(BaseModel):
    """Service dependency status."""
    requests: str
    beautifulsoup: str

class HealthMetrics(BaseModel):
    """Service health metrics."""
    uptime_seconds: int

class HealthData(BaseModel):
    """Complete health check response."""
    status: str
    timestamp: str
    version: str
    dependencies: DependencyStatus
    metrics: HealthMetrics

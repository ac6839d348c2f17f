"""Data models for the Social Media Extractor."""
from .requests import ExtractionRequest
from .page import PageDocument
from .extraction import (
    OpenGraphMap, ExtractionState, FailureReason, StructuredDataRecord,
    MediaCandidates, ExtractionResult, ExtractionFailure
)
from .responses import (
    FetchResponse, ErrorResponse, PlatformFeatures, SupportedPlatformsData,
    DependencyStatus, HealthMetrics, HealthData
)

__all__ = [
    "ExtractionRequest", "PageDocument",
    "OpenGraphMap", "ExtractionState", "FailureReason", "StructuredDataRecord",
    "MediaCandidates", "ExtractionResult", "ExtractionFailure",
    "FetchResponse", "ErrorResponse", "PlatformFeatures", "SupportedPlatformsData",
    "DependencyStatus", "HealthMetrics", "HealthData"
]

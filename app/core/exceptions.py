"""Custom exceptions for the Social Media Extractor."""
from typing import Optional

from app.models.extraction import FailureReason

class MediaExtractorBaseException(Exception):
    """Base exception for the media extractor service."""

    reason = FailureReason.UNEXPECTED_ERROR

    def __init__(self, message: str, error_code: str, details: Optional[dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

class MissingURLError(MediaExtractorBaseException):
    """Exception raised when the source URL parameter is absent or empty."""

    reason = FailureReason.BAD_REQUEST

    def __init__(self, message: str = "Missing url parameter"):
        super().__init__(message, "VALIDATION_ERROR")

class FetchError(MediaExtractorBaseException):
    """Exception raised when the page could not be retrieved."""

    reason = FailureReason.FETCH_ERROR

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        details = {"url": url, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(reason, "FETCH_FAILED", details)

    @classmethod
    def from_status(cls, url: str, status_code: int) -> "FetchError":
        """Build a fetch error for a non-success HTTP status."""
        return cls(url, f"Fetch failed: {status_code}", status_code)

class VideoNotFoundError(MediaExtractorBaseException):
    """Exception raised when no extraction stage produced a video URL."""

    reason = FailureReason.NOT_FOUND

    def __init__(self, url: str):
        message = "Video URL not found. Platform may block scraping or changed markup."
        details = {"url": url}
        super().__init__(message, "VIDEO_NOT_FOUND", details)

class ExtractionFailedError(MediaExtractorBaseException):
    """Exception raised when extraction fails unexpectedly."""

    reason = FailureReason.UNEXPECTED_ERROR

    def __init__(self, url: str, reason: str = "Technical error during extraction"):
        details = {"url": url, "reason": reason}
        super().__init__(reason, "EXTRACTION_FAILED", details)

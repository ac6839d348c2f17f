"""Extraction pipeline data models."""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

# Lower-cased meta property/name -> content, first-seen wins
OpenGraphMap = Dict[str, str]


class ExtractionState(str, Enum):
    """Stages of a single extraction run."""
    FETCHING = "fetching"
    PARSED = "parsed"
    OG_RESOLVED = "og_resolved"
    STRUCTURED_RESOLVED = "structured_resolved"
    FALLBACK_RESOLVED = "fallback_resolved"
    NORMALIZED = "normalized"
    CAPTION_RESOLVED = "caption_resolved"
    DONE = "done"
    FAILED = "failed"


class FailureReason(str, Enum):
    """Failure tags reported to the caller."""
    BAD_REQUEST = "bad-request"
    FETCH_ERROR = "fetch-error"
    NOT_FOUND = "not-found"
    PARSE_ERROR = "parse-error"
    UNEXPECTED_ERROR = "unexpected-error"


def _string_or_none(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


class StructuredDataRecord(BaseModel):
    """Fields of interest from one decoded JSON-LD object."""
    video_content_url: Optional[str] = Field(None, description="video.contentUrl")
    video_url: Optional[str] = Field(None, description="video.url")
    caption: Optional[str] = Field(None, description="caption")
    description: Optional[str] = Field(None, description="description")
    thumbnail_url: Optional[str] = Field(None, description="thumbnailUrl, first element if a list")

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "StructuredDataRecord":
        """Build a record from a decoded JSON-LD object.

        Values with an unexpected shape are treated as absent.
        """
        video_content_url = None
        video_url = None
        video = data.get("video")
        if isinstance(video, list) and video:
            video = video[0]
        if isinstance(video, dict):
            video_content_url = _string_or_none(video.get("contentUrl"))
            video_url = _string_or_none(video.get("url"))

        thumbnail = data.get("thumbnailUrl")
        if isinstance(thumbnail, list):
            thumbnail = thumbnail[0] if thumbnail else None

        return cls(
            video_content_url=video_content_url,
            video_url=video_url,
            caption=_string_or_none(data.get("caption")),
            description=_string_or_none(data.get("description")),
            thumbnail_url=_string_or_none(thumbnail),
        )

    @property
    def video(self) -> Optional[str]:
        """Preferred video URL of this record."""
        return self.video_content_url or self.video_url

    @property
    def caption_text(self) -> Optional[str]:
        """Caption, falling back to the description."""
        return self.caption or self.description


class MediaCandidates(BaseModel):
    """Partial result accumulated across extraction stages."""
    video_url: Optional[str] = None
    caption: Optional[str] = None
    thumbnail: Optional[str] = None

    def fill(self, **candidates: Optional[str]) -> None:
        """Set each given field only if it is still unset."""
        for field_name, value in candidates.items():
            if value and not getattr(self, field_name):
                setattr(self, field_name, value)


class ExtractionResult(BaseModel):
    """Successful extraction."""
    video_url: str = Field(..., min_length=1, description="Normalized direct media URL")
    caption: str = Field("", description="Whitespace-collapsed caption, possibly empty")
    thumbnail: Optional[str] = Field(None, description="Thumbnail URL if any source provided one")
    source: str = Field(..., description="The requested post URL")


class ExtractionFailure(BaseModel):
    """Failed extraction."""
    reason: FailureReason
    message: str

    @classmethod
    def from_exception(cls, exc: Exception) -> "ExtractionFailure":
        """Describe an exception raised by the pipeline."""
        reason = getattr(exc, "reason", FailureReason.UNEXPECTED_ERROR)
        message = getattr(exc, "message", None) or str(exc)
        return cls(reason=reason, message=message)

"""Request models for the Social Media Extractor."""
from pydantic import BaseModel, field_validator

class ExtractionRequest(BaseModel):
    """Request model for a single post extraction."""
    source_url: str

    @field_validator("source_url")
    @classmethod
    def source_url_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("source_url must not be empty")
        return value

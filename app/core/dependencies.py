"""Dependency injection setup for FastAPI."""
from functools import lru_cache
from fastapi import Depends

from app.services import ExtractionService

# Service instances cache
@lru_cache()
def get_extraction_service() -> ExtractionService:
    """Get ExtractionService instance."""
    return ExtractionService()

def get_extraction_service_dep(
    service: ExtractionService = Depends(get_extraction_service)
) -> ExtractionService:
    """Dependency for ExtractionService."""
    return service

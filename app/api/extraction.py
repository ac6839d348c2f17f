"""Extraction API endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.models.requests import ExtractionRequest
from app.services import ExtractionService
from app.core.dependencies import get_extraction_service_dep
from app.core.exceptions import MediaExtractorBaseException
from app.utils.response_helpers import ResponseHelper
from app.utils.validators import URLValidator

# Create router
router = APIRouter(prefix="/api", tags=["extraction"])


@router.get("/fetch")
async def fetch_post_media(
    url: Optional[str] = Query(None, description="Public URL of the social media post"),
    service: ExtractionService = Depends(get_extraction_service_dep)
):
    """Extract the direct video URL, caption and thumbnail of a post.

    Sources are tried in order: Open Graph meta tags, JSON-LD blocks, then
    platform-specific fields embedded in inline scripts (TikTok ``playAddr``,
    Instagram ``video_url``).
    """
    request_id = ResponseHelper.generate_request_id()

    try:
        request = ExtractionRequest(source_url=URLValidator.require_url(url))
        result = await service.extract(request, request_id)
        return ResponseHelper.create_success_response(result)

    except MediaExtractorBaseException as e:
        return ResponseHelper.create_error_from_exception(e)
    except Exception as e:
        return ResponseHelper.create_error_response(
            message=str(e),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

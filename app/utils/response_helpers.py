"""Response creation utilities."""
import uuid
from fastapi import status
from fastapi.responses import JSONResponse

from ..models.extraction import ExtractionResult
from ..models.responses import ErrorResponse, FetchResponse
from ..core.exceptions import MediaExtractorBaseException

SERVER_ERROR_PREFIX = "Server error: "

class ResponseHelper:
    """Utilities for creating API responses."""

    # Map error codes to HTTP status codes
    STATUS_MAPPING = {
        "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
        "VIDEO_NOT_FOUND": status.HTTP_404_NOT_FOUND,
        "FETCH_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "EXTRACTION_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    @staticmethod
    def generate_request_id() -> str:
        """Generate unique request ID."""
        return f"req_{uuid.uuid4().hex[:8]}"

    @staticmethod
    def create_success_response(result: ExtractionResult) -> JSONResponse:
        """Create the /api/fetch success body from an extraction result."""
        response = FetchResponse.from_result(result)
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=response.model_dump()
        )

    @staticmethod
    def create_error_response(
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST
    ) -> JSONResponse:
        """Create an error response.

        Server-side failures carry the ``Server error: `` prefix so callers can
        tell them apart from client errors and extraction misses.
        """
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            message = f"{SERVER_ERROR_PREFIX}{message}"

        response = ErrorResponse(error=message)
        return JSONResponse(
            status_code=status_code,
            content=response.model_dump()
        )

    @staticmethod
    def create_error_from_exception(exc: MediaExtractorBaseException) -> JSONResponse:
        """Create error response from custom exception."""
        http_status = ResponseHelper.STATUS_MAPPING.get(
            exc.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        return ResponseHelper.create_error_response(
            message=exc.message,
            status_code=http_status
        )

"""Main FastAPI application with modular architecture."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.exceptions import MediaExtractorBaseException
from app.api import extraction_router, health_router
from app.utils.logging import LoggerSetup
from app.utils.response_helpers import ResponseHelper

# Setup logging
LoggerSetup.setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(f"{settings.api_title} v{settings.api_version} starting up on port {settings.port}")
    logger.info("GET /api/fetch?url=<post_url>")
    yield
    # Shutdown
    logger.info("Application shutting down...")

# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan,
    swagger_ui_parameters={
        "defaultModelsExpandDepth": -1,
        "tryItOutEnabled": True,
    }
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global exception handler for custom exceptions
@app.exception_handler(MediaExtractorBaseException)
async def media_extractor_exception_handler(request, exc: MediaExtractorBaseException):
    """Handle custom media extractor exceptions."""
    return ResponseHelper.create_error_from_exception(exc)

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    """Handle HTTP exceptions, including routing 404s and 405s."""
    return ResponseHelper.create_error_response(
        message=str(exc.detail),
        status_code=exc.status_code
    )

@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.url.path}")
    return ResponseHelper.create_error_response(
        message=str(exc),
        status_code=500
    )

# Include routers
app.include_router(health_router)
app.include_router(extraction_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower()
    )

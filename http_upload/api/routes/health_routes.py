"""
Health check routes for monitoring.
"""
from fastapi import APIRouter
from http_upload.core import config
from http_upload.models.dto.upload_dto import HealthResponse

router = APIRouter(prefix="/v1/api", tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for monitoring."""
    return HealthResponse(
        status="healthy",
        service=config.settings.api_title,
        version=config.settings.api_version
    )

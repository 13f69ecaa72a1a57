"""
Data Transfer Objects for the Upload API.
Defines response schemas for API endpoints.
"""
from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Response schema for a successfully stored upload."""
    field: str = Field(..., description="Form field the file was sent in")
    filename: str = Field(..., description="Client supplied filename")
    mime_type: str = Field(..., description="Client declared MIME type")
    size: int = Field(..., ge=0, description="Size of the file in bytes")
    path: str = Field(..., description="Final location of the stored file")


class HealthResponse(BaseModel):
    """Response schema for the health check."""
    status: str
    service: str
    version: str

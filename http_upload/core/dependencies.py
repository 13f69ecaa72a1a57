"""
Dependency injection container for FastAPI.
Provides singleton-like behavior for services and the per-request upload table.
"""
from functools import lru_cache
from typing import AsyncIterator
from fastapi import Request
from http_upload.services.file_service import FileService
from http_upload.services.multipart_service import MultipartService
from http_upload.services.request_uploads import RequestUploads


@lru_cache()
def get_file_service() -> FileService:
    """Get FileService singleton instance."""
    return FileService()


@lru_cache()
def get_multipart_service() -> MultipartService:
    """Get MultipartService singleton instance."""
    return MultipartService()


async def get_request_uploads(request: Request) -> AsyncIterator[RequestUploads]:
    """
    Build the upload table for the current request.
    
    Temp files that were not moved are removed once the request is done.
    """
    form = await request.form()
    uploads = RequestUploads()
    try:
        await get_multipart_service().collect_uploads(form, uploads)
        yield uploads
    finally:
        uploads.cleanup()
        await form.close()

"""
Upload API routes.
Handles HTTP endpoints for storing uploaded files.
"""
import os
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from http_upload.core import config
from http_upload.core.dependencies import get_file_service, get_request_uploads
from http_upload.models.dto.upload_dto import UploadResponse
from http_upload.services.file_service import FileService
from http_upload.services.http_upload import HttpUpload
from http_upload.services.request_uploads import RequestUploads

router = APIRouter(prefix="/v1/api")


@router.post("/uploads", tags=["Uploads"], response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
def upload_file(
    field: str = Query(default="file", min_length=1, description="Form field holding the file"),
    filename: Optional[str] = Query(default=None, description="Store under this name instead of a free one"),
    uploads: RequestUploads = Depends(get_request_uploads),
    file_service: FileService = Depends(get_file_service)
):
    """
    Store a file sent as multipart form data.
    
    - **field**: form field to read (default `file`)
    - **filename**: optional target name inside the upload directory; an existing file is replaced
    """
    upload = HttpUpload(field, uploads, file_service=file_service)
    
    upload_dir = config.settings.upload_dir
    os.makedirs(upload_dir, exist_ok=True)
    
    if filename:
        destination = os.path.join(upload_dir, file_service.sanitize_filename(filename))
    else:
        destination = upload_dir
    
    path = upload.move(destination)
    
    return UploadResponse(
        field=field,
        filename=upload.name,
        mime_type=upload.mime_type,
        size=upload.size,
        path=path
    )

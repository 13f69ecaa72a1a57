"""
Global exception handler for the HTTP Upload API.
Provides centralized error handling for all API exceptions.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from .exceptions import (
    FieldNotFoundException,
    UploadFailedException,
    MoveFailedException
)
from http_upload.models.upload_error import UploadError

logger = logging.getLogger(__name__)

SIZE_ERRORS = {UploadError.INI_SIZE, UploadError.FORM_SIZE}


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    
    @app.exception_handler(FieldNotFoundException)
    async def handle_field_not_found(request: Request, exc: FieldNotFoundException):
        return JSONResponse(
            status_code=400,
            content={"error": "Field Not Found", "message": exc.message}
        )
    
    @app.exception_handler(UploadFailedException)
    async def handle_upload_failed(request: Request, exc: UploadFailedException):
        status_code = 413 if exc.error_code in SIZE_ERRORS else 400
        return JSONResponse(
            status_code=status_code,
            content={"error": "Upload Failed", "message": exc.message}
        )
    
    @app.exception_handler(MoveFailedException)
    async def handle_move_failed(request: Request, exc: MoveFailedException):
        return JSONResponse(
            status_code=500,
            content={"error": "Move Failed", "message": exc.message}
        )
    
    @app.exception_handler(Exception)
    async def handle_generic_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "message": "An unexpected error occurred"}
        )

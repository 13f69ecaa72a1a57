"""
Custom exceptions for the HTTP Upload API.
Provides specific error types for different failure scenarios.
"""


class HttpUploadException(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class FieldNotFoundException(HttpUploadException):
    """Raised when the requested field is not part of the request uploads."""
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"File key not found: {field_name}")


class UploadFailedException(HttpUploadException):
    """Raised when the upload mechanism reported a nonzero error code."""
    def __init__(self, message: str, error_code: int):
        self.error_code = error_code
        super().__init__(message)


class MoveFailedException(HttpUploadException):
    """Raised when an uploaded file could not be relocated."""
    pass
